"""Logging utilities for icon-font-generator.

Two channels are used:

- User-facing progress goes through the shared rich ``console`` via
  :func:`log` and :func:`log_output`, and is silenced per run.
- Diagnostics go through structlog loggers bound to stdlib logging, which
  stay quiet until :func:`configure_logging` installs handlers.
"""

import logging
from pathlib import Path
from typing import Any

import structlog
from rich.console import Console
from rich.markup import escape

console = Console()

LOGGER_NAME = "icon_font_generator"


def get_logger(name: str = LOGGER_NAME) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger that writes through stdlib logging."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


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
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(logging.DEBUG)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        package_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(console_handler)

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

    logger = get_logger()
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


def log(options: Any, message: str) -> None:
    """Print a console message unless the run is silent.

    Args:
        options: Anything with a ``silent`` attribute
        message: Rich markup to print
    """
    if getattr(options, "silent", False):
        return
    console.print(message)


def log_output(options: Any, *parts: str | Path) -> None:
    """Log a generated file.

    Args:
        options: Anything with a ``silent`` attribute
        parts: Path segments, joined and made absolute
    """
    path = Path(*parts).absolute()
    log(options, f"[blue]Generated[/blue] [cyan]{escape(str(path))}[/cyan]")
