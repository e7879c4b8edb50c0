"""Utility functions for icon-font-generator.

This module provides utility functions including:

- Structured logging setup and configuration
- Silenceable console output for generation reports
"""

from icon_font_generator.utils.logging import (
    configure_logging,
    console,
    get_logger,
    log,
    log_output,
)

__all__ = [
    "configure_logging",
    "console",
    "get_logger",
    "log",
    "log_output",
]
