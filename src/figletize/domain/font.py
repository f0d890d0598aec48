"""Font, glyph and line representation.

This module defines the immutable domain model produced by the font parser
and consumed by the rendering engine:

- Line: One row of one glyph, with its padding counts
- Glyph: The fixed-height rows drawing one character
- Font: Glyph tables plus the layout parameters of a FIGlet font
- TextDirection: Enum for print direction
- SmushMode: Bit flags selecting kerning, smushing and the smush rules
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, IntFlag
from types import MappingProxyType

DENSE_SLOTS = 256


class TextDirection(Enum):
    """Direction that text reads when rendered with a font."""

    LEFT_TO_RIGHT = 0
    RIGHT_TO_LEFT = 1


class SmushMode(IntFlag):
    """Horizontal layout bits of a FIGlet font.

    The low six bits select the controlled smushing rules. ``KERN`` and
    ``SMUSH`` select the layout itself; a value of zero means full width.
    """

    EQUAL = 0b00000001
    LOWLINE = 0b00000010
    HIERARCHY = 0b00000100
    PAIR = 0b00001000
    BIGX = 0b00010000
    HARDBLANK = 0b00100000
    KERN = 0b01000000
    SMUSH = 0b10000000


FULL_WIDTH = 0
RULES = 0b00111111


@dataclass(frozen=True, slots=True)
class Line:
    """One row of a glyph.

    Attributes:
        content: Row characters, hard blanks included
        space_before: Number of leading padding spaces in content
        space_after: Number of trailing padding spaces in content
    """

    content: str
    space_before: int = 0
    space_after: int = 0

    @classmethod
    def from_content(cls, content: str) -> "Line":
        """Build a line, counting its padding.

        Args:
            content: Row characters after end marks were stripped

        Returns:
            Line with space_before/space_after computed
        """
        stripped = content.lstrip(" ")
        space_before = len(content) - len(stripped)
        if not stripped:
            return cls(content, space_before, space_before)
        return cls(content, space_before, len(content) - len(content.rstrip(" ")))

    @property
    def front_char(self) -> str:
        """First column after the leading padding, or a space."""
        if len(self.content) == self.space_before:
            return " "
        return self.content[self.space_before]

    @property
    def back_char(self) -> str:
        """Last column before the trailing padding, or a space."""
        if len(self.content) == self.space_after:
            return " "
        return self.content[len(self.content) - self.space_after - 1]

    def __len__(self) -> int:
        return len(self.content)


@dataclass(frozen=True, slots=True)
class Glyph:
    """The rows drawing one character, top to bottom."""

    rows: tuple[Line, ...]

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        """Width of the first row."""
        return len(self.rows[0]) if self.rows else 0

    @classmethod
    def from_strings(cls, rows: list[str]) -> "Glyph":
        """Build a glyph from already stripped row strings."""
        return cls(tuple(Line.from_content(row) for row in rows))


@dataclass(frozen=True, eq=False)
class Font:
    """A parsed FIGlet font.

    Fonts are fully built by the parser before being handed out and are never
    mutated afterwards, so one instance can serve any number of concurrent
    render calls.

    Attributes:
        height: Rows per glyph
        baseline: Rows from the top to the baseline (informational)
        direction: Print direction, used as smush tie-break
        hard_blank: Sentinel for blank-but-smushable columns
        smush_mode: Horizontal layout bits (see SmushMode)
        name: Font name, usually the file stem
        comments: Header comment lines, verbatim
        glyphs_by_slot: Dense table for codepoints 0-255
        glyphs_sparse: Glyphs for every other codepoint
    """

    height: int
    baseline: int
    direction: TextDirection
    hard_blank: str
    smush_mode: int
    name: str = ""
    comments: tuple[str, ...] = ()
    glyphs_by_slot: tuple[Glyph | None, ...] = (None,) * DENSE_SLOTS
    glyphs_sparse: Mapping[int, Glyph] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        if len(self.glyphs_by_slot) != DENSE_SLOTS:
            raise ValueError(f"glyphs_by_slot must have {DENSE_SLOTS} entries")
        if not isinstance(self.glyphs_sparse, MappingProxyType):
            object.__setattr__(
                self, "glyphs_sparse", MappingProxyType(dict(self.glyphs_sparse))
            )

    def get_glyph(self, char: str) -> Glyph | None:
        """Resolve the glyph used to draw ``char``.

        Characters the font does not define fall back to the glyph at
        codepoint 0, when the font has one.

        Returns:
            Glyph, or None when neither the character nor a fallback exists
        """
        code = ord(char)
        glyph = None
        if 0 <= code < DENSE_SLOTS:
            glyph = self.glyphs_by_slot[code]
        if glyph is None:
            glyph = self.glyphs_sparse.get(code)
        if glyph is None:
            glyph = self.glyphs_by_slot[0]
        return glyph

    def contains(self, char: str) -> bool:
        """Check whether the font defines ``char`` itself (no fallback)."""
        code = ord(char)
        if 0 <= code < DENSE_SLOTS and self.glyphs_by_slot[code] is not None:
            return True
        return code in self.glyphs_sparse

    def codepoints(self) -> list[int]:
        """Return every codepoint the font defines, sorted."""
        dense = [code for code, glyph in enumerate(self.glyphs_by_slot) if glyph is not None]
        return sorted(set(dense) | set(self.glyphs_sparse))

    @property
    def glyph_count(self) -> int:
        return len(self.codepoints())

    @property
    def layout(self) -> SmushMode:
        """Smush mode as flags."""
        return SmushMode(self.smush_mode & 0xFF)

    def render(self, message: str, smush_override: int | None = None) -> str:
        """Render ``message`` with this font.

        See figletize.core.renderer.render.
        """
        from figletize.core.renderer import render

        return render(self, message, smush_override)
