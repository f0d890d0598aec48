"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages. Banners themselves are printed as plain
text so markup characters inside them are never interpreted.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from figletize.domain.font import Font, SmushMode, TextDirection

console = Console(highlight=False)
error_console = Console(stderr=True, highlight=False)

# Unicode symbols for consistent visual language
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_banner(banner: str) -> None:
    """Print a rendered banner verbatim.

    Args:
        banner: Rendered banner text
    """
    console.out(banner, highlight=False)


def describe_layout(smush_mode: int) -> str:
    """Describe a smush mode in words.

    Args:
        smush_mode: Smush mode bits

    Returns:
        e.g. "smushing (equal, pair)", "kerning", "full width"
    """
    flags = SmushMode(smush_mode & 0xFF)
    if SmushMode.SMUSH in flags:
        rules = [
            rule.name.lower()
            for rule in (
                SmushMode.EQUAL,
                SmushMode.LOWLINE,
                SmushMode.HIERARCHY,
                SmushMode.PAIR,
                SmushMode.BIGX,
                SmushMode.HARDBLANK,
            )
            if rule in flags
        ]
        return f"smushing ({', '.join(rules)})" if rules else "smushing (universal)"
    if smush_mode:
        return "kerning"
    return "full width"


def print_font_info(font: Font) -> None:
    """Print font metadata.

    Args:
        font: Parsed font
    """
    direction = "left to right" if font.direction == TextDirection.LEFT_TO_RIGHT else "right to left"
    console.print(Text(f"\n{font.name or '(unnamed)'}", style="bold"))
    console.print(f"  {font.height} rows {SYM_DOT} baseline {font.baseline} {SYM_DOT} {direction}")
    console.print(f"  {font.glyph_count} glyphs {SYM_DOT} {describe_layout(font.smush_mode)}")
    console.print(Text(f"  hard blank {font.hard_blank!r}"))
    if font.comments:
        console.print("\n[bold]Comments[/bold]")
        for comment in font.comments:
            console.print(Text(f"  {comment}"))


def print_font_list(names: list[str], default: str | None = None) -> None:
    """Print the available font names.

    Args:
        names: Font names
        default: Name marked as the default font
    """
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("font")
    table.add_column("note", style="dim")
    for name in names:
        table.add_row(name, "default" if name == default else "")
    console.print(f"[bold]{len(names)} fonts[/bold]")
    console.print(table)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[bold green]{SYM_OK}[/bold green] {message}")


def print_diagnostics(diagnostics: list) -> None:
    """Print code generation diagnostics.

    Args:
        diagnostics: Diagnostic entries, in input order
    """
    for diagnostic in diagnostics:
        line = Text(f"  {SYM_DOT} ")
        line.append(str(diagnostic))
        error_console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    line = Text(f"{SYM_ERR} Error: ", style="bold red")
    line.append(message, style="default")
    error_console.print(line)
    if details:
        error_console.print(Text(f"  {details}"))
