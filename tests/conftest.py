"""Shared fixtures: in-memory FIGlet font definitions."""

import pytest

from figletize.domain import Font
from figletize.io import parse_font_bytes

ASCII = tuple(range(32, 127))
EXTENDED = (196, 214, 220, 228, 246, 252, 223)


def _row(content: str, last: bool) -> str:
    mark = "#" if content.endswith("@") else "@"
    return content + (mark * 2 if last else mark)


def build_font_source(
    glyphs: dict[str, list[str]] | None = None,
    *,
    height: int = 1,
    hard_blank: str = "$",
    old_layout: int = -1,
    direction: int | None = None,
    full_layout: int | None = None,
    codetag_count: int | None = None,
    comments: list[str] | None = None,
    tagged: list[tuple[str, list[str]]] | None = None,
    include_extended: bool = True,
    newline: str = "\n",
) -> bytes:
    """Build the bytes of a complete .flf font.

    Required characters missing from ``glyphs`` are drawn as the character
    itself on every row (the hard blank for space).

    Args:
        glyphs: Rows per character
        tagged: (code tag line, rows) blocks appended after the required set
    """
    glyphs = glyphs or {}
    comments = comments or []
    optional = [direction, full_layout, codetag_count]
    while optional and optional[-1] is None:
        optional.pop()
    optional = [0 if value is None else value for value in optional]
    fields = [height, height, 20, old_layout, len(comments), *optional]

    lines = [f"flf2a{hard_blank} " + " ".join(str(int(value)) for value in fields)]
    lines.extend(comments)

    codes = ASCII + (EXTENDED if include_extended else ())
    for code in codes:
        char = chr(code)
        default = hard_blank if code == 32 else char
        rows = glyphs.get(char, [default] * height)
        assert len(rows) == height, f"glyph {char!r} needs {height} rows"
        lines.extend(_row(row, i == height - 1) for i, row in enumerate(rows))

    for tag, rows in tagged or []:
        lines.append(tag)
        lines.extend(_row(row, i == len(rows) - 1) for i, row in enumerate(rows))

    return (newline.join(lines) + newline).encode("latin-1")


def build_font(glyphs: dict[str, list[str]] | None = None, name: str = "test", **kwargs) -> Font:
    """Parse a font built by build_font_source."""
    return parse_font_bytes(build_font_source(glyphs, **kwargs), name=name)


@pytest.fixture
def font_source():
    """Factory fixture returning .flf bytes."""
    return build_font_source


@pytest.fixture
def make_font():
    """Factory fixture returning parsed fonts."""
    return build_font
