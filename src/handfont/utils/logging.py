"""Logging utilities for Handfont."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class ExportStats:
    """Statistics from one font export."""

    glyph_count: int = 0
    stroke_count: int = 0
    point_count: int = 0
    empty_count: int = 0
    skipped_count: int = 0
    glyph_times_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate export duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_glyph_time_ms(self) -> float | None:
        """Average vectorization time per glyph."""
        if not self.glyph_times_ms:
            return None
        return sum(self.glyph_times_ms) / len(self.glyph_times_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("handfont")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ExportLogger:
    """Logger for tracking per-glyph export progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("handfont")
        self._stats = ExportStats()

    def reset(self) -> None:
        """Start a new export with empty statistics."""
        self._stats = ExportStats()

    def log_glyph_start(self, character: str) -> None:
        """Log start of glyph vectorization."""
        self._logger.debug("Vectorizing glyph", character=character)

    def log_glyph_complete(
        self,
        character: str,
        strokes: int,
        points: int,
        duration_ms: float,
    ) -> None:
        """Log a vectorized glyph."""
        self._logger.info(
            "Glyph vectorized",
            character=character,
            strokes=strokes,
            points=points,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.glyph_count += 1
        self._stats.stroke_count += strokes
        self._stats.point_count += points
        self._stats.glyph_times_ms.append(duration_ms)
        if strokes == 0:
            self._stats.empty_count += 1

    def log_skipped(self, character: str, reason: str) -> None:
        """Log a drawing that was not turned into a glyph."""
        self._logger.warning("Drawing skipped", character=character, reason=reason)
        self._stats.skipped_count += 1

    @property
    def stats(self) -> ExportStats:
        """Get current export statistics."""
        return self._stats
