"""CLI application entry point for figletize.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from figletize import __version__
from figletize.cli.output import (
    console,
    print_banner,
    print_diagnostics,
    print_error,
    print_font_info,
    print_font_list,
    print_success,
)
from figletize.cli.shell import run_shell
from figletize.codegen import load_specs, write_module
from figletize.config import (
    FigletizeSettings,
    FontSourceConfig,
    LoggingConfig,
    RenderConfig,
)
from figletize.core import RenderCache
from figletize.domain import Font
from figletize.exceptions import CodeGenerationError, FigletizeError
from figletize.io import FontLibrary, parse_font
from figletize.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="figletize",
    help="Render text as large ASCII-art banners using FIGlet fonts.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Figletize[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    font_path: Annotated[
        Path | None,
        typer.Option(
            "--font-path",
            help="Directory or .zip archive of .flf fonts (default: bundled fonts)",
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Render text as large ASCII-art banners using FIGlet fonts."""
    settings = FigletizeSettings(
        fonts=FontSourceConfig(font_path=font_path),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )
    ctx.obj = settings


def _settings(ctx: typer.Context) -> FigletizeSettings:
    return ctx.obj if isinstance(ctx.obj, FigletizeSettings) else FigletizeSettings()


def _load_font(settings: FigletizeSettings, font_name: str | None, font_file: Path | None) -> Font:
    """Resolve the font to use from a file or the library.

    Raises:
        FigletizeError: If the font cannot be found or parsed
        OSError: If the font file cannot be read
    """
    if font_file is not None:
        with font_file.open("rb") as stream:
            return parse_font(stream, name=font_file.stem)
    library = FontLibrary(settings.fonts.font_path)
    return library.get(font_name or settings.render.font)


FontOption = Annotated[
    str | None,
    typer.Option("--font", "-f", help="Font name (see `figletize fonts`)"),
]
FontFileOption = Annotated[
    Path | None,
    typer.Option(
        "--font-file",
        help="Path to a .flf font file (overrides --font)",
        exists=True,
        dir_okay=False,
    ),
]
SmushOption = Annotated[
    int | None,
    typer.Option(
        "--smush",
        "-s",
        help="Smush mode replacing the font's own (0 = full width, 64 = kerning)",
        min=0,
        max=255,
    ),
]


@app.command()
def render(
    ctx: typer.Context,
    text: Annotated[
        str,
        typer.Argument(help="Text to render", show_default=False),
    ],
    font: FontOption = None,
    font_file: FontFileOption = None,
    smush: SmushOption = None,
) -> None:
    """Render TEXT as a banner.

    Example:
        figletize render "Hello" --font bubble
    """
    settings = _settings(ctx)
    render_config = RenderConfig(font=font or settings.render.font, smush_override=smush)
    try:
        selected = _load_font(settings, render_config.font, font_file)
    except (FigletizeError, OSError) as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_banner(selected.render(text, render_config.smush_override))


@app.command()
def fonts(ctx: typer.Context) -> None:
    """List the available fonts."""
    settings = _settings(ctx)
    try:
        names = FontLibrary(settings.fonts.font_path).names()
    except FigletizeError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_font_list(names, default=settings.render.font)


@app.command()
def info(
    ctx: typer.Context,
    font: Annotated[
        str | None,
        typer.Argument(help="Font name", show_default=False),
    ] = None,
    font_file: FontFileOption = None,
) -> None:
    """Show metadata of a font."""
    settings = _settings(ctx)
    try:
        selected = _load_font(settings, font, font_file)
    except (FigletizeError, OSError) as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_font_info(selected)


@app.command()
def shell(
    ctx: typer.Context,
    font: FontOption = None,
    font_file: FontFileOption = None,
    smush: SmushOption = None,
) -> None:
    """Render messages interactively until an empty line is entered."""
    settings = _settings(ctx)
    try:
        selected = _load_font(settings, font, font_file)
    except (FigletizeError, OSError) as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    cache = RenderCache(max_entries=settings.fonts.cache_size)
    run_shell(selected, cache, smush_override=smush)


@app.command()
def generate(
    ctx: typer.Context,
    specs_file: Annotated[
        Path,
        typer.Argument(
            help="JSON list of {member, font, text} banners",
            exists=True,
            dir_okay=False,
            show_default=False,
        ),
    ],
    output: Annotated[
        Path,
        typer.Argument(help="Python module to write", show_default=False),
    ],
) -> None:
    """Generate a Python module of pre-rendered banner constants."""
    settings = _settings(ctx)
    try:
        specs = load_specs(specs_file)
        write_module(specs, output, FontLibrary(settings.fonts.font_path))
    except CodeGenerationError as e:
        print_error(str(e))
        print_diagnostics(e.diagnostics)
        raise typer.Exit(code=1)
    except (FigletizeError, OSError) as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    plural = "banner" if len(specs) == 1 else "banners"
    print_success(f"Wrote {len(specs)} {plural} to {output}")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
