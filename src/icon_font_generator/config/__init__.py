"""Configuration management for icon-font-generator.

This module provides configuration management using Pydantic models.
Options can be provided via CLI arguments, a raw mapping, or defaults.

Key classes:
- FontType: Font formats the engine can produce
- GenerationOptions: Options for one generation run
- LoggingConfig: Logging settings
"""

from icon_font_generator.config.settings import (
    DEFAULT_OPTIONS,
    DEFAULT_START_CODEPOINT,
    FONT_TYPES,
    OPTIONAL_PARAMS,
    TEMPLATES,
    FontType,
    GenerationOptions,
    LoggingConfig,
    resolve_options,
)

__all__ = [
    "DEFAULT_OPTIONS",
    "DEFAULT_START_CODEPOINT",
    "FONT_TYPES",
    "OPTIONAL_PARAMS",
    "TEMPLATES",
    "FontType",
    "GenerationOptions",
    "LoggingConfig",
    "resolve_options",
]
