"""Font library for looking up fonts by name.

This module provides the FontLibrary class, which locates font definitions
in a directory or a zip archive, parses them on first use and keeps the
parsed fonts for the lifetime of the library.
"""

import threading
import zipfile
from collections.abc import Iterator
from contextlib import contextmanager
from importlib import resources
from pathlib import Path
from typing import BinaryIO

import structlog

from figletize.domain.font import Font
from figletize.exceptions import FontArchiveError, UnknownFontError
from figletize.io.parser import FontParser
from figletize.utils.string_pool import StringPool

FONT_SUFFIX = ".flf"
BUNDLED_ARCHIVE = "fonts.zip"
DEFAULT_FONT = "standard"


def bundled_archive() -> Path:
    """Path of the font archive shipped inside the package."""
    return Path(str(resources.files("figletize") / "fonts" / BUNDLED_ARCHIVE))


def is_font_name(name: str) -> bool:
    """Check that ``name`` is a plain file stem, not a path."""
    return bool(name) and name not in (".", "..") and not any(sep in name for sep in "/\\")


class FontLibrary:
    """Name to font lookup over a font source.

    The source is either a directory holding ``.flf`` files or a zip archive
    of them. Fonts are addressed by file stem (case-sensitive) and parsed
    lazily; each font is parsed at most once per library.

    Example:
        library = FontLibrary()
        font = library.get("standard")
        print(font.render("Hi"))
    """

    def __init__(self, source: Path | None = None, pool: StringPool | None = None) -> None:
        """Initialize the library.

        Args:
            source: Directory or .zip archive (default: bundled archive)
            pool: String pool shared by every parse (default: a new pool)
        """
        self._source = Path(source) if source is not None else bundled_archive()
        self._parser = FontParser(pool if pool is not None else StringPool())
        self._fonts: dict[str, Font] = {}
        self._lock = threading.Lock()
        self._logger = structlog.get_logger("figletize.library")

    @property
    def source(self) -> Path:
        return self._source

    @property
    def is_archive(self) -> bool:
        return self._source.suffix.lower() == ".zip"

    def names(self) -> list[str]:
        """Return the sorted names of every font in the source.

        Raises:
            FontArchiveError: If the source cannot be read
        """
        if self.is_archive:
            with self._open_archive() as archive:
                members = archive.namelist()
            return sorted(
                member[: -len(FONT_SUFFIX)]
                for member in members
                if member.endswith(FONT_SUFFIX) and "/" not in member
            )

        if not self._source.is_dir():
            raise FontArchiveError(str(self._source), "not a directory or .zip archive")
        return sorted(path.stem for path in self._source.glob(f"*{FONT_SUFFIX}"))

    def get(self, name: str) -> Font:
        """Get a font by name.

        Raises:
            UnknownFontError: If no font with that name exists
            MalformedFontError: If the font definition is invalid
            FontArchiveError: If the source cannot be read
        """
        font = self.try_get(name)
        if font is None:
            raise UnknownFontError(name)
        return font

    def try_get(self, name: str) -> Font | None:
        """Get a font by name, or None if the source has no such font.

        Raises:
            MalformedFontError: If the font definition is invalid
            FontArchiveError: If the source cannot be read
        """
        with self._lock:
            font = self._fonts.get(name)
        if font is not None:
            return font

        with self._open_font(name) as stream:
            if stream is None:
                self._logger.debug("Font not found", font=name, source=str(self._source))
                return None
            font = self._parser.parse(stream, name=name)

        with self._lock:
            font = self._fonts.setdefault(name, font)
        self._logger.debug("Font loaded", font=name, height=font.height, glyphs=font.glyph_count)
        return font

    def get_or_default(self, name: str, default: str = DEFAULT_FONT) -> Font:
        """Get a font by name, falling back to ``default`` when it is missing."""
        font = self.try_get(name)
        if font is None:
            self._logger.info("Using default font", requested=name, default=default)
            font = self.get(default)
        return font

    def load_all(self) -> dict[str, Font]:
        """Parse every font in the source."""
        return {name: self.get(name) for name in self.names()}

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self.names()

    @contextmanager
    def _open_archive(self) -> Iterator[zipfile.ZipFile]:
        try:
            archive = zipfile.ZipFile(self._source)
        except (OSError, zipfile.BadZipFile) as e:
            raise FontArchiveError(str(self._source), str(e)) from e
        with archive:
            yield archive

    @contextmanager
    def _open_font(self, name: str) -> Iterator[BinaryIO | None]:
        """Open the definition of ``name``, yielding None when absent."""
        if not is_font_name(name):
            yield None
            return

        filename = name + FONT_SUFFIX
        if self.is_archive:
            with self._open_archive() as archive:
                try:
                    info = archive.getinfo(filename)
                except KeyError:
                    yield None
                    return
                with archive.open(info) as stream:
                    yield stream
            return

        if not self._source.is_dir():
            raise FontArchiveError(str(self._source), "not a directory or .zip archive")
        path = self._source / filename
        if not path.is_file():
            yield None
            return
        with path.open("rb") as stream:
            yield stream
