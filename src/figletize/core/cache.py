"""Render cache with banner measurement helpers.

Rendering is deterministic, so a banner rendered once for a given font,
text and smush mode can be handed out again without recomputation.
"""

import threading
from collections import OrderedDict

import structlog

from figletize.core.renderer import NEWLINE, render
from figletize.domain.font import Font

CacheKey = tuple[int, str, int]


class RenderCache:
    """Memoises rendered banners.

    Entries are keyed on the exact font instance, the text and the effective
    smush mode. The cache is owned by its caller; there is no process-wide
    instance. Entries hold a reference to their font, so a font id is never
    reused while its entries are alive.

    Example:
        cache = RenderCache()
        banner = cache.render("Hello", font)
        width = cache.width("Hello", font)
    """

    def __init__(self, max_entries: int = 1024) -> None:
        """Initialize an empty cache.

        Args:
            max_entries: Entries kept before the least recently used is dropped
        """
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self._max_entries = max_entries
        self._entries: OrderedDict[CacheKey, tuple[Font, str]] = OrderedDict()
        self._lock = threading.Lock()
        self._logger = structlog.get_logger("figletize.cache")
        self.hits = 0
        self.misses = 0

    def render(
        self,
        text: str,
        font: Font,
        *args: object,
        smush_override: int | None = None,
    ) -> str:
        """Render ``text`` in ``font``, reusing a previous result if any.

        Args:
            text: Text to render; a format string when args are given
            font: Font to render with
            *args: Positional values substituted with str.format
            smush_override: Smush mode for this call only

        Returns:
            The rendered banner
        """
        if args:
            text = text.format(*args)

        mode = font.smush_mode if smush_override is None else smush_override
        key = (id(font), text, mode)

        with self._lock:
            cached = self._entries.get(key)
            if cached is not None:
                self._entries.move_to_end(key)
                self.hits += 1
                return cached[1]

        banner = render(font, text, mode)

        with self._lock:
            self.misses += 1
            self._entries[key] = (font, banner)
            self._entries.move_to_end(key)
            while len(self._entries) > self._max_entries:
                self._entries.popitem(last=False)

        self._logger.debug("Banner rendered", font=font.name, length=len(text), mode=mode)
        return banner

    def lines(self, text: str, font: Font) -> list[str]:
        """Rendered banner split into rows."""
        return self.render(text, font).replace("\r", "").split(NEWLINE)

    def width(self, text: str, font: Font) -> int:
        """Width of the rendered banner in columns."""
        return len(self.lines(text, font)[0])

    def height(self, text: str, font: Font) -> int:
        """Number of rows in the rendered banner."""
        return len(self.lines(text, font))

    def clear(self) -> None:
        """Drop every cached banner."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
