"""Rich console output helpers for the CLI.

This module provides user-friendly console output using the Rich library.
Generation progress itself is printed by the pipeline through the same
console; the helpers here cover the CLI-only messages.
"""

from rich.markup import escape
from rich.text import Text

from icon_font_generator.utils.logging import console

# Unicode symbols for consistent visual language
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]icon-font-generator[/bold] v{version}")
    console.print("─" * 44)


def print_inputs(pattern_count: int, file_count: int) -> None:
    """Print how many files the input globs matched."""
    console.print(f"  {pattern_count} patterns {SYM_DOT} [green]{file_count}[/green] SVG files")


def print_deleted(paths: list[str]) -> None:
    """Print font files removed because their format was not requested."""
    for path in paths:
        line = Text(f"  {SYM_DOT} removed ")
        line.append(path)
        console.print(line)


def print_error(message: str) -> None:
    """Print an error message, markup in it shown literally."""
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")


def print_unexpected_error() -> None:
    """Print the active exception with a full traceback."""
    console.print(f"\n[bold red]{SYM_ERR} Unexpected error[/bold red]")
    console.print_exception()
