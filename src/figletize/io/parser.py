"""FIGlet font (.flf) parser.

This module reads a font definition from a binary stream and builds an
immutable Font. The grammar is line oriented:

    flf2a$ 6 5 16 15 11 0 24463 229     header (signature + hard blank)
    ...                                 comment lines
    <height lines per character>        required characters, fixed order
    196  LATIN CAPITAL LETTER A ...     optional code-tagged characters
    <height lines>

Every glyph line ends with an end mark (conventionally ``@``), doubled on the
last line of a block.
"""

import io
from typing import BinaryIO

from figletize.domain.font import (
    DENSE_SLOTS,
    FULL_WIDTH,
    RULES,
    Font,
    Glyph,
    Line,
    SmushMode,
    TextDirection,
)
from figletize.exceptions import MalformedFontError
from figletize.utils.string_pool import StringPool

SIGNATURE = "flf2a"
ENCODING = "latin-1"

ASCII_CODEPOINTS: tuple[int, ...] = tuple(range(32, 127))
# Ä Ö Ü ä ö ü ß, in the order fonts store them
EXTENDED_CODEPOINTS: tuple[int, ...] = (196, 214, 220, 228, 246, 252, 223)
REQUIRED_CODEPOINTS: tuple[int, ...] = ASCII_CODEPOINTS + EXTENDED_CODEPOINTS


def smush_mode_from_layout(old_layout: int, full_layout: int | None = None) -> int:
    """Derive the horizontal smush mode from header layout fields.

    Args:
        old_layout: Legacy layout field (-1 full width, 0 kerning, >0 rules)
        full_layout: Full layout field; takes precedence when present

    Returns:
        Smush mode bits (see SmushMode)
    """
    if full_layout is not None:
        if (full_layout & (SmushMode.KERN | SmushMode.SMUSH)) == 0:
            return FULL_WIDTH
        return full_layout & 0xFF

    if old_layout < 0:
        return FULL_WIDTH
    if old_layout == 0:
        return int(SmushMode.KERN)
    return (old_layout & RULES) | int(SmushMode.SMUSH)


def parse_codepoint(token: str) -> int:
    """Parse a code tag: decimal, 0x hexadecimal or leading-zero octal.

    Raises:
        ValueError: If the token is not a number
    """
    sign = 1
    if token.startswith("-"):
        sign, token = -1, token[1:]
    if token[:2].lower() == "0x":
        return sign * int(token[2:], 16)
    if len(token) > 1 and token.startswith("0"):
        return sign * int(token[1:], 8)
    return sign * int(token, 10)


def strip_end_marks(raw: str) -> str:
    """Remove trailing whitespace and the end mark run from a glyph line."""
    content = raw.rstrip()
    if not content:
        return content
    return content.rstrip(content[-1])


def _is_code_tag(line: str) -> bool:
    """Check whether a line opens a code-tagged block rather than a glyph row."""
    tokens = line.split(maxsplit=1)
    if not tokens:
        return False
    try:
        parse_codepoint(tokens[0])
    except ValueError:
        return False
    return True


class _LineReader:
    """Line iterator over a binary stream that tracks line numbers."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self.line_number = 0

    def read(self) -> str | None:
        raw = self._stream.readline()
        if not raw:
            return None
        self.line_number += 1
        return raw.decode(ENCODING).rstrip("\r\n")


class FontParser:
    """Parses FIGlet font definitions into Font instances.

    A parser is stateless between calls; the optional StringPool is shared
    so repeated row strings across fonts are stored once.

    Example:
        with open("standard.flf", "rb") as stream:
            font = FontParser().parse(stream, name="standard")
    """

    def __init__(self, pool: StringPool | None = None) -> None:
        self._pool = pool

    def parse(self, stream: BinaryIO, name: str = "") -> Font:
        """Parse one font definition.

        Args:
            stream: Readable binary stream positioned at the header
            name: Name given to the font (usually the file stem)

        Returns:
            Immutable Font

        Raises:
            MalformedFontError: If the stream does not follow the grammar
            OSError: If the stream cannot be read
        """
        reader = _LineReader(stream)

        header = reader.read()
        if header is None:
            raise MalformedFontError(0, "empty font definition")
        (
            hard_blank,
            height,
            baseline,
            old_layout,
            comment_count,
            direction,
            full_layout,
            codetag_count,
        ) = self._parse_header(header, reader.line_number)

        comments = []
        for _ in range(comment_count):
            line = reader.read()
            if line is None:
                raise MalformedFontError(
                    reader.line_number,
                    f"expected {comment_count} comment lines, found {len(comments)}",
                )
            comments.append(line)

        dense: list[Glyph | None] = [None] * DENSE_SLOTS
        sparse: dict[int, Glyph] = {}

        # Older fonts stop after ASCII and may go straight to code tags
        pending_tag = None
        for code in REQUIRED_CODEPOINTS:
            first = reader.read()
            if code in EXTENDED_CODEPOINTS and first is not None and _is_code_tag(first):
                pending_tag = first
                break
            if first is None:
                if code in EXTENDED_CODEPOINTS:
                    break
                raise MalformedFontError(
                    reader.line_number,
                    f"missing required character {code} ({chr(code)!r})",
                )
            dense[code] = self._read_glyph(reader, height, first)

        blocks_read = 0
        while codetag_count is None or blocks_read < codetag_count:
            tag_line = pending_tag if pending_tag is not None else reader.read()
            pending_tag = None
            if tag_line is None:
                if codetag_count is not None:
                    raise MalformedFontError(
                        reader.line_number,
                        f"expected {codetag_count} code-tagged characters, "
                        f"found {blocks_read}",
                    )
                break
            if codetag_count is None and not tag_line.strip():
                continue
            code = self._parse_tag(tag_line, reader.line_number)
            glyph = self._read_glyph(reader, height)
            if 0 <= code < DENSE_SLOTS:
                dense[code] = glyph
            else:
                sparse[code] = glyph
            blocks_read += 1

        return Font(
            height=height,
            baseline=baseline,
            direction=direction,
            hard_blank=hard_blank,
            smush_mode=smush_mode_from_layout(old_layout, full_layout),
            name=name,
            comments=tuple(comments),
            glyphs_by_slot=tuple(dense),
            glyphs_sparse=sparse,
        )

    def _parse_header(
        self, header: str, line_number: int
    ) -> tuple[str, int, int, int, int, TextDirection, int | None, int | None]:
        """Validate the header line and extract its fields."""
        if not header.startswith(SIGNATURE) or len(header) <= len(SIGNATURE):
            raise MalformedFontError(line_number, f"missing '{SIGNATURE}' signature")

        hard_blank = header[len(SIGNATURE)]
        tokens = header[len(SIGNATURE) + 1 :].split()
        if len(tokens) < 5:
            raise MalformedFontError(
                line_number, f"header needs at least 5 fields, found {len(tokens)}"
            )

        values = []
        for position, token in enumerate(tokens[:8]):
            try:
                values.append(int(token))
            except ValueError:
                raise MalformedFontError(
                    line_number, f"header field {position + 1} is not an integer: {token!r}"
                ) from None

        height, baseline, _max_length, old_layout, comment_count = values[:5]
        if height < 1:
            raise MalformedFontError(line_number, f"height must be at least 1, got {height}")
        if baseline > height:
            raise MalformedFontError(
                line_number, f"baseline {baseline} exceeds height {height}"
            )
        if comment_count < 0:
            raise MalformedFontError(
                line_number, f"comment line count must not be negative, got {comment_count}"
            )

        direction = TextDirection.LEFT_TO_RIGHT
        if len(values) > 5:
            try:
                direction = TextDirection(values[5])
            except ValueError:
                raise MalformedFontError(
                    line_number, f"unknown print direction {values[5]}"
                ) from None

        full_layout = values[6] if len(values) > 6 else None
        if full_layout is not None and full_layout < 0:
            raise MalformedFontError(
                line_number, f"full layout must not be negative, got {full_layout}"
            )
        codetag_count = values[7] if len(values) > 7 else None
        if codetag_count is not None and codetag_count < 0:
            codetag_count = None

        return (
            hard_blank,
            height,
            baseline,
            old_layout,
            comment_count,
            direction,
            full_layout,
            codetag_count,
        )

    def _parse_tag(self, tag_line: str, line_number: int) -> int:
        token = tag_line.split(maxsplit=1)[0] if tag_line.strip() else ""
        try:
            return parse_codepoint(token)
        except ValueError:
            raise MalformedFontError(
                line_number, f"invalid character code tag: {tag_line!r}"
            ) from None

    def _read_glyph(
        self, reader: _LineReader, height: int, first: str | None = None
    ) -> Glyph:
        """Read ``height`` glyph lines into a Glyph."""
        rows: list[Line] = []
        pending = first
        for row in range(height):
            raw = pending if pending is not None else reader.read()
            pending = None
            if raw is None:
                raise MalformedFontError(
                    reader.line_number,
                    f"character block ended after {row} of {height} rows",
                )
            if not raw.rstrip():
                raise MalformedFontError(
                    reader.line_number, "glyph row has no end mark"
                )
            content = strip_end_marks(raw)
            if self._pool is not None:
                content = self._pool.pool(content)
            rows.append(Line.from_content(content))
        return Glyph(tuple(rows))


def parse_font(
    stream: BinaryIO, name: str = "", pool: StringPool | None = None
) -> Font:
    """Parse a font definition from a binary stream.

    See FontParser.parse.
    """
    return FontParser(pool).parse(stream, name)


def parse_font_bytes(data: bytes, name: str = "", pool: StringPool | None = None) -> Font:
    """Parse a font definition held in memory."""
    return parse_font(io.BytesIO(data), name, pool)
