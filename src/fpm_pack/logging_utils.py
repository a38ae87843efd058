"""Logging utilities for the CLI and pipeline modules."""

from __future__ import annotations

import logging
from pathlib import Path


DEFAULT_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "fpm_pack.log"
PACKAGE_LOGGER = "fpm_pack"
CONSOLE_HANDLER_NAME = "fpm_pack.console"
FILE_HANDLER_NAME = "fpm_pack.file"
_OWNED_HANDLERS = frozenset({CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME})


def remove_owned_handlers(logger: logging.Logger | None = None) -> None:
    """Detach and close the handlers configure_logging installed, and nothing else."""

    target = logger or logging.getLogger(PACKAGE_LOGGER)
    for handler in list(target.handlers):
        if handler.get_name() in _OWNED_HANDLERS:
            target.removeHandler(handler)
            handler.close()


def configure_logging(
    log_file: Path,
    level: int = logging.INFO,
    console_level: int = logging.WARNING,
) -> logging.Logger:
    """Attach console and file handlers to the ``fpm_pack`` logger.

    Handlers owned by the host process (root logger or otherwise) are left
    alone. Calling this again replaces the previous pair, so repeated runs in
    one process do not duplicate output.
    """

    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(PACKAGE_LOGGER)
    remove_owned_handlers(logger)
    logger.setLevel(min(level, console_level))

    formatter = logging.Formatter(fmt=DEFAULT_LOG_FORMAT, datefmt=DEFAULT_DATE_FORMAT)

    # User-facing progress goes through typer.echo; the console handler is for problems.
    stream_handler = logging.StreamHandler()
    stream_handler.set_name(CONSOLE_HANDLER_NAME)
    stream_handler.setFormatter(formatter)
    stream_handler.setLevel(console_level)

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.set_name(FILE_HANDLER_NAME)
    file_handler.setFormatter(formatter)
    file_handler.setLevel(level)

    logger.addHandler(stream_handler)
    logger.addHandler(file_handler)
    return logger
