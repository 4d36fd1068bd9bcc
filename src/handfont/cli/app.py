"""CLI application entry point for handfont.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from handfont import __version__
from handfont.cli.output import (
    SYM_OK,
    console,
    create_progress,
    print_drawings_loaded,
    print_error,
    print_header,
    print_progress_table,
    print_step,
    print_success,
)
from handfont.config import ExtractionConfig, HandfontSettings, LoggingConfig
from handfont.core import BitmapStore, FontAssembler, PreviewComposer
from handfont.domain import CharacterSet
from handfont.exceptions import EmptyCanvasError, HandfontError
from handfont.io import BitmapReader, FontEncoder, FontWriter
from handfont.utils import ExportLogger, configure_logging

app = typer.Typer(
    name="handfont",
    help="Turn hand-drawn glyph images into a font.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Handfont[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def _root(
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
    """Turn hand-drawn glyph images into a font."""


def load_store(glyph_dir: Path) -> tuple[BitmapStore, list[str]]:
    """Load every drawing of a directory into a new store.

    Args:
        glyph_dir: Directory of "A.png" / "U+0041.png" images

    Returns:
        The store and the characters whose drawings were blank
    """
    store = BitmapStore()
    skipped: list[str] = []
    for character, bitmap in BitmapReader(glyph_dir).iter_bitmaps():
        try:
            store.set(character, bitmap)
        except EmptyCanvasError:
            skipped.append(character)
    return store, skipped


def _require_directory(glyph_dir: Path) -> None:
    if not glyph_dir.is_dir():
        print_error(
            f"Glyph directory not found: {glyph_dir}",
            details="Provide a directory of images named like A.png or U+0041.png.",
        )
        raise typer.Exit(code=1)


@app.command()
def build(
    glyph_dir: Annotated[
        Path,
        typer.Argument(help="Directory of glyph drawings", show_default=False),
    ],
    name: Annotated[
        str,
        typer.Option("--name", "-n", help="Font family name"),
    ] = "MyHandFont",
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output path (default: {name}.ttf)"),
    ] = None,
    step: Annotated[
        int,
        typer.Option("--step", help="Sampling stride in pixels", min=1, max=64),
    ] = 5,
    threshold: Annotated[
        float,
        typer.Option("--threshold", help="Stroke chaining distance in pixels", min=0.1),
    ] = 50.0,
    cap: Annotated[
        int,
        typer.Option("--cap", help="Maximum points per stroke", min=2),
    ] = 100,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Write detailed logs to file"),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Verbose console output"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Minimal console output"),
    ] = False,
) -> None:
    """Vectorize a directory of drawings and write a TrueType font.

    Example:
        handfont build drawings/ --name MyHandFont
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    _require_directory(glyph_dir)

    settings = HandfontSettings(
        extraction=ExtractionConfig(step=step, threshold=threshold, max_stroke_length=cap),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)

    try:
        if not quiet:
            print_step("Loading drawings")
        store, skipped = load_store(glyph_dir)
        if not quiet:
            print_drawings_loaded(store.size(), skipped, verbose)

        export_logger = ExportLogger(logger)
        assembler = FontAssembler(
            font_config=settings.font,
            extraction_config=settings.extraction,
            export_logger=export_logger,
        )

        if not quiet:
            print_step("Vectorizing")
            with create_progress() as progress:
                task_id = progress.add_task("Vectorizing", total=store.size())

                def update_progress(completed: int, *_: object) -> None:
                    progress.update(task_id, completed=completed)

                model = assembler.assemble_store(name, store, update_progress)
        else:
            model = assembler.assemble_store(name, store)

        for character in skipped:
            export_logger.log_skipped(character, "blank drawing")

        data = FontEncoder().encode(model)
        output_path = output or FontWriter.default_path(model.family_name)
        FontWriter(output_path).write(data)

        if not quiet:
            stats = export_logger.stats
            print_success(
                output_path=str(output_path),
                size_bytes=len(data),
                total_time_s=stats.duration_seconds,
                glyphs=stats.glyph_count,
                strokes=stats.stroke_count,
                empty=stats.empty_count,
                skipped=stats.skipped_count,
                avg_time_ms=stats.avg_glyph_time_ms,
            )

    except HandfontError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def preview(
    glyph_dir: Annotated[
        Path,
        typer.Argument(help="Directory of glyph drawings", show_default=False),
    ],
    text: Annotated[
        str,
        typer.Argument(help="Text to preview", show_default=False),
    ],
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Preview image path"),
    ] = Path("preview.png"),
) -> None:
    """Render a text preview from the stored drawings."""
    _require_directory(glyph_dir)

    try:
        store, _ = load_store(glyph_dir)
    except HandfontError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    result = PreviewComposer().compose(text, store)
    if result.image is None:
        console.print(result.message)
        return

    result.image.save(output)
    console.print(f"[bold green]{SYM_OK}[/bold green] Preview written to {output}")


@app.command()
def progress(
    glyph_dir: Annotated[
        Path,
        typer.Argument(help="Directory of glyph drawings", show_default=False),
    ],
) -> None:
    """Show how much of the character set has been drawn."""
    _require_directory(glyph_dir)

    try:
        store, _ = load_store(glyph_dir)
    except HandfontError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    charset = CharacterSet()
    rows = []
    for category, characters in charset.categories.items():
        drawn = sum(1 for c in characters if c in store)
        next_char = next((c for c in characters if c not in store), None)
        rows.append((category, drawn, len(characters), next_char))

    completed, total = charset.progress(store)
    print_progress_table(completed, total, rows)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
