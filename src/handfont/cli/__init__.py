"""Command-line interface for handfont.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Font export from a directory of drawings
- Text preview rendering
- Progress over the character set
"""

from handfont.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
