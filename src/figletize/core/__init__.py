"""Core rendering algorithms for figletize.

This module contains the core algorithms for:

- Glyph placement (fit computation, padding trim, boundary merge)
- Smushing rules (universal and controlled smushing)
- Memoised rendering with banner measurement helpers

The renderer and smushing rules are designed to be:
- Stateless (safe to call from any thread)
- Pure (no side effects, no logging)
- Total (every message renders; unknown characters fall back or are skipped)

Key functions:
- render: Render a message with a font
- try_smush: Merge two boundary characters

Key classes:
- RenderCache: Caller-owned memo of rendered banners
"""

from figletize.core.cache import RenderCache
from figletize.core.renderer import render
from figletize.core.smush import try_smush

__all__ = [
    "RenderCache",
    "render",
    "try_smush",
]
