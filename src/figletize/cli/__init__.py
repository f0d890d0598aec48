"""Command-line interface for figletize.

This module provides the CLI using Typer with rich output.

Key features:
- Render text with bundled fonts or a .flf file
- Font listing and metadata display
- Interactive render shell
- Build-time generation of banner constant modules
"""

from figletize.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
