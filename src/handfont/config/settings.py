"""Configuration settings for Handfont."""

from pathlib import Path

from pydantic import BaseModel, Field


class ExtractionConfig(BaseModel):
    """Configuration for sampling bitmaps and chaining samples into strokes."""

    step: int = Field(
        default=5,
        ge=1,
        le=64,
        description="Sampling stride in pixels",
    )
    threshold: float = Field(
        default=50.0,
        gt=0.0,
        description="Samples closer than this (in pixels) join the same stroke",
    )
    max_stroke_length: int = Field(
        default=100,
        ge=2,
        description="Maximum number of points in one stroke",
    )
    red_cutoff: int = Field(
        default=128,
        ge=0,
        le=255,
        description="A sample is ink when its red channel is below this value",
    )
    alpha_cutoff: int = Field(
        default=128,
        ge=0,
        le=255,
        description="A sample is ink when its alpha channel is above this value",
    )


class FontConfig(BaseModel):
    """Fixed vertical metrics and naming for generated fonts."""

    units_per_em: int = Field(
        default=1000,
        ge=16,
        le=16384,
        description="Font design units per em",
    )
    ascender: int = Field(default=800, description="Ascender in font units")
    descender: int = Field(default=-200, le=0, description="Descender in font units")
    advance_width: int = Field(
        default=650,
        ge=0,
        description="Advance width given to every glyph",
    )
    style_name: str = Field(default="Regular", description="Style name")
    default_family_name: str = Field(
        default="MyHandFont",
        min_length=1,
        description="Family name used when none is given",
    )


class PreviewConfig(BaseModel):
    """Layout of the raster text preview."""

    width: int = Field(default=600, ge=1, description="Preview width in pixels")
    height: int = Field(default=100, ge=1, description="Preview height in pixels")
    char_width: int = Field(default=30, ge=1, description="Cell size per character")
    gutter: int = Field(default=5, ge=0, description="Space after each drawn cell")
    start_x: int = Field(default=10, ge=0, description="Initial cursor position")
    baseline_y: int = Field(
        default=70,
        ge=25,
        description="Vertical anchor of the cells; cells start 25 pixels above it",
    )
    placeholder_color: str = Field(
        default="#ccc",
        description="Fill colour for characters that have not been drawn",
    )
    empty_message: str = Field(
        default="Draw some characters first!",
        description="Shown instead of a preview while nothing is drawn",
    )


class SurfaceConfig(BaseModel):
    """Drawing surface dimensions and brush."""

    width: int = Field(default=400, ge=1, description="Canvas width in pixels")
    height: int = Field(default=400, ge=1, description="Canvas height in pixels")
    brush_size: int = Field(default=5, ge=1, le=50, description="Pen width in pixels")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class HandfontSettings(BaseModel):
    """Main application settings."""

    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    font: FontConfig = Field(default_factory=FontConfig)
    preview: PreviewConfig = Field(default_factory=PreviewConfig)
    surface: SurfaceConfig = Field(default_factory=SurfaceConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> HandfontSettings:
    """Get default application settings."""
    return HandfontSettings()
