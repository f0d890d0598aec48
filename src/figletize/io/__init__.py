"""Font I/O layer for figletize.

This module handles reading FIGlet font definitions. It provides a clean
abstraction layer between font sources and the domain models.

Key responsibilities:
- Parse .flf font definitions from binary streams
- Derive the smush mode from header layout fields
- Locate fonts by name in a directory or zip archive
- Cache parsed fonts per library instance

Key classes:
- FontParser: Parse a font definition into a Font
- FontLibrary: Look up fonts by name
"""

from figletize.io.library import DEFAULT_FONT, FontLibrary, bundled_archive
from figletize.io.parser import (
    FontParser,
    parse_font,
    parse_font_bytes,
    smush_mode_from_layout,
)

__all__ = [
    "DEFAULT_FONT",
    "FontLibrary",
    "FontParser",
    "bundled_archive",
    "parse_font",
    "parse_font_bytes",
    "smush_mode_from_layout",
]
