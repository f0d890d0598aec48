"""Figletize - Render text as large ASCII-art banners.

Figletize parses FIGlet font definitions (.flf) and renders text with them,
honouring each font's kerning and smushing rules.

Example:
    $ figletize render "Hello" --font standard

    >>> from figletize import FontLibrary
    >>> print(FontLibrary().get("term").render("Hello"))
    Hello
"""

__version__ = "0.1.0"

from figletize.core import RenderCache, render
from figletize.domain import Font, Glyph, Line, SmushMode, TextDirection
from figletize.io import FontLibrary, FontParser, parse_font

__all__ = [
    "Font",
    "FontLibrary",
    "FontParser",
    "Glyph",
    "Line",
    "RenderCache",
    "SmushMode",
    "TextDirection",
    "__version__",
    "parse_font",
    "render",
]
