"""Interning of glyph row strings.

Many fonts repeat identical rows across glyphs (blank rows, bubble walls,
shared serifs). Pooling them keeps one string object per distinct row.
"""

import threading


class StringPool:
    """Returns one shared instance for every distinct string value.

    Example:
        pool = StringPool()
        a = pool.pool("  _  ")
        b = pool.pool("".join([" ", " _  "]))
        assert a is b
    """

    def __init__(self) -> None:
        self._strings: dict[str, str] = {}
        self._lock = threading.Lock()

    def pool(self, value: str) -> str:
        """Return the first-seen instance equal to ``value``."""
        with self._lock:
            return self._strings.setdefault(value, value)

    def __len__(self) -> int:
        return len(self._strings)

    def __contains__(self, value: object) -> bool:
        return value in self._strings
