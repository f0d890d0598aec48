"""Domain models for figletize.

This module contains the immutable domain models representing a parsed
FIGlet font. All models are designed to be:

- Immutable (frozen dataclasses, read-only glyph tables)
- Safe to share between threads without synchronisation
- Independent of where the font definition was read from

Key classes:
- Line: One row of a glyph with its padding counts
- Glyph: The rows drawing one character
- Font: Glyph tables and layout parameters
- TextDirection: Print direction
- SmushMode: Layout and smushing rule flags
"""

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

__all__: list[str] = [
    # Constants
    "DENSE_SLOTS",
    "FULL_WIDTH",
    "RULES",
    # Enums
    "SmushMode",
    "TextDirection",
    # Core types
    "Line",
    "Glyph",
    "Font",
]
