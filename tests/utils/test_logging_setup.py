# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Tests for the process-wide logging setup."""

import io
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest
from rich.console import Console
from rich.logging import RichHandler

from metriclog.core import getLogger
from metriclog.io import LoggingConfig
from metriclog.utils import LevelAwareFormatter, setup_logging
from metriclog.utils.logger import RICH_THEME


@pytest.fixture
def console_output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(console_output: io.StringIO) -> Console:
    return Console(file=console_output, theme=RICH_THEME, width=200)


def _file_config(tmp_path: Path, **overrides) -> LoggingConfig:
    values = {
        "console": False,
        "file_name": "plugin.log",
        "file_path": tmp_path / "logs",
    }
    values.update(overrides)
    return LoggingConfig(**values)


def test_file_handler_created(tmp_path: Path, restore_root_logger):
    config = _file_config(tmp_path, limit_kbytes=2, backup_count=4)

    setup_logging(config)

    handlers = restore_root_logger.handlers
    assert len(handlers) == 1
    handler = handlers[0]
    assert isinstance(handler, RotatingFileHandler)
    assert handler.maxBytes == 2048
    assert handler.backupCount == 4
    assert (tmp_path / "logs").is_dir()


def test_messages_reach_log_file(tmp_path: Path, restore_root_logger):
    setup_logging(_file_config(tmp_path))

    logger = getLogger("metriclog.tests.setup")
    logger.info("published ", 12, " metrics")
    logger.debug("hidden")
    for handler in restore_root_logger.handlers:
        handler.flush()

    content = (tmp_path / "logs" / "plugin.log").read_text(encoding="utf-8")
    assert "[INFO] metriclog.tests.setup: published 12 metrics" in content
    assert "hidden" not in content


def test_root_level_follows_config(tmp_path: Path, restore_root_logger):
    setup_logging(_file_config(tmp_path, level="debug"))
    assert restore_root_logger.level == logging.DEBUG

    setup_logging(_file_config(tmp_path, level="fatal"))
    assert restore_root_logger.level == logging.ERROR


def test_no_file_handler_without_file_name(console: Console, restore_root_logger):
    setup_logging(LoggingConfig(file_name=""), console=console)

    handlers = restore_root_logger.handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], RichHandler)


def test_setup_replaces_and_closes_previous_file_handler(
    tmp_path: Path, restore_root_logger
):
    setup_logging(_file_config(tmp_path))
    first = restore_root_logger.handlers[0]

    setup_logging(_file_config(tmp_path, file_name="other.log"))

    assert first not in restore_root_logger.handlers
    assert first.stream is None
    assert len(restore_root_logger.handlers) == 1


def test_console_output_escapes_markup(
    console: Console, console_output: io.StringIO, restore_root_logger
):
    setup_logging(LoggingConfig(file_name=""), console=console)

    getLogger("metriclog.tests.setup").warn("values [bold]", [1, 2])

    output = console_output.getvalue()
    assert "values [bold][1, 2]" in output
    assert "WARNING" in output


def test_console_output_renders_traceback(
    console: Console, console_output: io.StringIO, restore_root_logger
):
    setup_logging(LoggingConfig(file_name=""), console=console)

    try:
        raise ValueError("bad sample")
    except ValueError as e:
        getLogger("metriclog.tests.setup").error(e, "sample rejected")

    output = console_output.getvalue()
    assert "sample rejected" in output
    assert "bad sample" in output


@pytest.mark.parametrize(
    "levelno,expected",
    [
        (logging.DEBUG, "[debug]msg[/debug]"),
        (logging.INFO, "[info]msg[/info]"),
        (logging.WARNING, "[warning]msg[/warning]"),
        (logging.ERROR, "[error]msg[/error]"),
        (logging.CRITICAL, "[error]msg[/error]"),
    ],
)
def test_style_message(levelno, expected):
    assert LevelAwareFormatter.style_message(levelno, "msg") == expected


def test_formatter_leaves_record_untouched():
    formatter = LevelAwareFormatter("%(message)s")
    record = logging.LogRecord(
        "metriclog", logging.INFO, __file__, 1, "plain [x]", None, None
    )

    assert formatter.format(record) == "[info]plain \\[x][/info]"
    assert record.getMessage() == "plain [x]"
    assert record.message == "plain [x]"
