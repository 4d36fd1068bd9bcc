"""Configuration management for handfont.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- ExtractionConfig: Bitmap sampling and stroke chaining settings
- FontConfig: Metrics and naming of generated fonts
- PreviewConfig: Text preview layout
- SurfaceConfig: Drawing surface size and brush
- LoggingConfig: Logging settings
- HandfontSettings: Main application settings
"""

from handfont.config.settings import (
    ExtractionConfig,
    FontConfig,
    HandfontSettings,
    LoggingConfig,
    PreviewConfig,
    SurfaceConfig,
    get_default_settings,
)

__all__ = [
    "ExtractionConfig",
    "FontConfig",
    "HandfontSettings",
    "LoggingConfig",
    "PreviewConfig",
    "SurfaceConfig",
    "get_default_settings",
]
