"""Logging utilities backed by rich console output.

Every module logs through a logger obtained here, so the CLI and the
library share one console and one level setting.

Usage:
    from common.logger import get_logger

    logger = get_logger(__name__)
    logger.debug("Scanned 12 records")
    logger.warning("Dropping record abc12345: missing trailing block")
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from .env import env

# Global console instance for consistent output
console = Console()


def _rich_handler(show_time: bool = False, show_path: bool = False) -> RichHandler:
    handler = RichHandler(
        console=console,
        show_time=show_time,
        show_path=show_path,
        rich_tracebacks=True,
        tracebacks_show_locals=True,
        markup=True,
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


def get_logger(
    name: str,
    level: str | None = None,
    show_time: bool = False,
    show_path: bool = False,
) -> logging.Logger:
    """Get a configured logger with rich output.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               If None, uses the LOG_LEVEL environment variable or INFO.
        show_time: Show timestamp in log output
        show_path: Show file path in log output

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Avoid adding multiple handlers if logger already configured
    if logger.handlers:
        return logger

    logger.setLevel((level or env.log_level()).upper())
    logger.addHandler(_rich_handler(show_time=show_time, show_path=show_path))

    # Propagate so pytest caplog sees records
    logger.propagate = True

    return logger


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure the root logger once, at the CLI entry point.

    Args:
        level: Default logging level; LOG_LEVEL overrides it when set
        log_file: Optional file path to also log to a file
    """
    import os

    level = os.getenv("LOG_LEVEL", level).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(_rich_handler())

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)


def success(message: str) -> None:
    """Print a success message with a green checkmark."""
    console.print(f"[green]✓[/green] {message}")


def error(message: str) -> None:
    """Print an error message with a red cross to stderr."""
    Console(stderr=True).print(f"[red]✗[/red] {message}")
