"""Interactive banner shell.

Reads one message per line, renders it and prints the banner, until an
empty line or end of input.
"""

import structlog

from figletize.cli.output import console, print_banner
from figletize.core.cache import RenderCache
from figletize.domain.font import Font

PROMPT = "Message: "


def run_shell(font: Font, cache: RenderCache, smush_override: int | None = None) -> int:
    """Run the read-render-print loop.

    Args:
        font: Font to render with
        cache: Render cache shared across the session
        smush_override: Smush mode for every render

    Returns:
        Number of banners rendered
    """
    logger = structlog.get_logger("figletize.shell")
    rendered = 0

    while True:
        try:
            message = console.input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        if not message:
            break

        print_banner(cache.render(message, font, smush_override=smush_override))
        rendered += 1

    logger.debug("Shell finished", rendered=rendered)
    return rendered
