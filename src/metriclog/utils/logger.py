# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Process-wide logging setup for metriclog."""

import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.theme import Theme

from metriclog.core import logger
from metriclog.io import LoggingConfig


# Create a theme for consistent styling
RICH_THEME = Theme(
    {
        "error": "bold red",
        "warning": "yellow",
        "info": "green",
        "debug": "blue",
    }
)

FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class LevelAwareFormatter(logging.Formatter):
    """Formatter that wraps messages in level-specific rich markup.

    The message itself is escaped so that brackets in logged values are not
    read as markup.
    """

    @staticmethod
    def style_message(levelno: int, message: str) -> str:
        message = escape(message)
        if levelno >= logging.ERROR:
            return f"[error]{message}[/error]"
        elif levelno == logging.WARNING:
            return f"[warning]{message}[/warning]"
        elif levelno == logging.INFO:
            return f"[info]{message}[/info]"
        elif levelno <= logging.DEBUG:
            return f"[debug]{message}[/debug]"
        return message

    def formatMessage(self, record: logging.LogRecord) -> str:
        # RichHandler formats traceback records through formatMessage only
        styled = logging.makeLogRecord(record.__dict__)
        styled.message = self.style_message(record.levelno, record.message)
        return super().formatMessage(styled)


def _console_handler(console: Console) -> RichHandler:
    rich_handler = RichHandler(
        console=console,
        rich_tracebacks=True,
        omit_repeated_times=False,
        show_path=False,
        enable_link_path=True,
        markup=True,
        log_time_format="[%X]",
    )
    rich_handler.setFormatter(LevelAwareFormatter("%(message)s", datefmt=DATE_FORMAT))
    return rich_handler


def _file_handler(config: LoggingConfig) -> RotatingFileHandler:
    log_file = config.log_file
    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=config.limit_kbytes * 1024,
        backupCount=config.backup_count,
        encoding="utf-8",
    )
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    return file_handler


def setup_logging(
    config: Optional[LoggingConfig] = None,
    console: Optional[Console] = None,
) -> None:
    """Configure the logging system from a LoggingConfig.

    Meant to be called once at process start. Existing root handlers are
    replaced; file handlers among them are closed.

    Args:
        config: Settings to apply (defaults to ``LoggingConfig()``)
        console: Optional Rich console instance to use
    """
    config = config or LoggingConfig()

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        if isinstance(handler, logging.FileHandler):
            handler.close()

    root.setLevel(config.log_level.value)

    if config.console:
        if console is None:
            console = Console(theme=RICH_THEME)
        root.addHandler(_console_handler(console))

    if config.log_file is not None:
        root.addHandler(_file_handler(config))

    logger.debug(
        "Logging configured: level=", config.level, ", file=", config.log_file
    )
