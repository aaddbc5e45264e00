"""Logging setup for the classdeps CLI.

Library modules only call ``get_logger(__name__)``; handlers are installed
by ``setup_logging``, which the CLI runs once per invocation. Log output
goes to stderr so it never mixes with JSON reports on stdout.
"""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from classdeps.core.config.settings import LoggingSettings, get_settings

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _console_handler(settings: LoggingSettings) -> logging.Handler:
    if settings.use_rich:
        # markup off: file paths and Java generics contain [ ] and < >
        return RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
            markup=False,
        )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(settings.format))
    return handler


def _file_handler(settings: LoggingSettings) -> logging.Handler:
    settings.file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(settings.file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def setup_logging(settings: LoggingSettings | None = None) -> None:
    """Install console and optional file handlers on the root logger.

    Handlers from an earlier call are closed and replaced, so calling this
    repeatedly (as the CLI tests do) does not leak open log files.

    Args:
        settings: Logging settings. Uses global settings if not provided.
    """
    if settings is None:
        settings = get_settings().logging

    root_logger = logging.getLogger()
    for old in list(root_logger.handlers):
        root_logger.removeHandler(old)
        old.close()

    root_logger.setLevel(getattr(logging, settings.level))
    root_logger.addHandler(_console_handler(settings))
    if settings.file:
        root_logger.addHandler(_file_handler(settings))


def get_logger(name: str) -> logging.Logger:
    """Get a module logger.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)
