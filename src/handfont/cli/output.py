"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars, tables, and formatted messages.
"""

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

console = Console()

SYM_STEP = "▸"
SYM_OK = "✓"
SYM_ERR = "✗"
SYM_DOT = "·"


def create_progress() -> Progress:
    """Create a rich progress bar for glyph vectorization.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header."""
    console.print(f"\n[bold]Handfont[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_drawings_loaded(loaded: int, skipped: list[str], verbose: bool) -> None:
    """Print how many drawings were loaded.

    Args:
        loaded: Number of drawings saved into the store
        skipped: Characters whose drawings were blank
        verbose: Whether to list skipped characters
    """
    console.print(f"  [green]{loaded}[/green] drawings loaded")
    if skipped:
        console.print(f"  [yellow]{len(skipped)}[/yellow] blank drawings skipped")
        if verbose:
            console.print(f"  {' '.join(skipped)}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    output_path: str,
    size_bytes: int,
    total_time_s: float,
    glyphs: int,
    strokes: int,
    empty: int,
    skipped: int = 0,
    avg_time_ms: float | None = None,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        size_bytes: Font file size
        total_time_s: Total vectorization time in seconds
        glyphs: Number of glyphs vectorized
        strokes: Total number of strokes
        empty: Glyphs that produced no strokes
        skipped: Blank drawings left out of the font
        avg_time_ms: Average vectorization time per glyph in milliseconds
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({size_bytes / 1024:.0f} KB)" if size_bytes >= 1024 else f" ({size_bytes} B)")
    console.print(line)

    empty_style = "yellow" if empty > 0 else "green"
    console.print(
        f"  {glyphs} glyphs {SYM_DOT} {strokes} strokes {SYM_DOT} "
        f"[{empty_style}]{empty} empty[/{empty_style}] {SYM_DOT} {skipped} skipped"
    )
    if avg_time_ms is not None:
        console.print(f"  {avg_time_ms:.1f}ms avg per glyph")


def print_progress_table(
    completed: int,
    total: int,
    rows: list[tuple[str, int, int, str | None]],
) -> None:
    """Print drawing progress per category.

    Args:
        completed: Drawn characters
        total: Characters in the set
        rows: (category, drawn, size, next undrawn character)
    """
    console.print(f"\n[bold]{completed}[/bold] / {total} characters drawn")
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Category")
    table.add_column("Drawn", justify="right")
    table.add_column("Next")
    for category, drawn, size, next_char in rows:
        table.add_row(category, f"{drawn}/{size}", next_char or SYM_OK)
    console.print(table)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
