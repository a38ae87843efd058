from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from fpm_pack.logging_utils import (
    CONSOLE_HANDLER_NAME,
    FILE_HANDLER_NAME,
    configure_logging,
    remove_owned_handlers,
)


@pytest.fixture(autouse=True)
def clean_package_logger() -> Iterator[None]:
    yield
    remove_owned_handlers()


def _owned(logger: logging.Logger) -> list[str]:
    names = [handler.get_name() for handler in logger.handlers]
    return [name for name in names if name in {CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME}]


def test_configure_logging_writes_file(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "fpm_pack.log"

    logger = configure_logging(log_file)
    logging.getLogger("fpm_pack.pipeline").info("pipeline.start format=%s", "deb")
    for handler in logger.handlers:
        handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "| INFO | fpm_pack.pipeline | pipeline.start format=deb" in text


def test_configure_logging_keeps_host_handlers(tmp_path: Path) -> None:
    root = logging.getLogger()
    host_handler = logging.NullHandler()
    root.addHandler(host_handler)
    try:
        configure_logging(tmp_path / "a.log")
        configure_logging(tmp_path / "b.log")

        assert host_handler in root.handlers
        assert _owned(logging.getLogger("fpm_pack")) == [CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME]
    finally:
        root.removeHandler(host_handler)


def test_console_level_is_configurable(tmp_path: Path) -> None:
    logger = configure_logging(tmp_path / "run.log", console_level=logging.INFO)

    console = next(handler for handler in logger.handlers if handler.get_name() == CONSOLE_HANDLER_NAME)
    assert console.level == logging.INFO


def test_remove_owned_handlers_leaves_others(tmp_path: Path) -> None:
    logger = configure_logging(tmp_path / "run.log")
    other = logging.NullHandler()
    logger.addHandler(other)
    try:
        remove_owned_handlers(logger)

        assert logger.handlers == [other]
    finally:
        logger.removeHandler(other)
