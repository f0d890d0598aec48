"""Utility functions for figletize.

This module provides utility functions including:

- Logging setup and configuration
- String interning for glyph rows
"""

from figletize.utils.logging import configure_logging
from figletize.utils.string_pool import StringPool

__all__ = [
    "StringPool",
    "configure_logging",
]
