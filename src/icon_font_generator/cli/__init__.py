"""Command-line interface for icon-font-generator.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Glob expansion of input patterns
- Silent mode for scripted use
- Concise validation errors, full tracebacks for unexpected failures
"""

from icon_font_generator.cli.app import cli, main

__all__ = ["cli", "main"]
