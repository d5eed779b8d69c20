# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from .errors import (
    MetricLogError,
    InvalidMessagesError,
    InvalidLevelError,
)

from .backend import (
    Level,
    LogBackend,
    StdlibBackend,
)

from .logger import Logger, build_message, getLogger, logger

__all__ = [
    "MetricLogError",
    "InvalidMessagesError",
    "InvalidLevelError",
    "Level",
    "LogBackend",
    "StdlibBackend",
    "Logger",
    "build_message",
    "getLogger",
    "logger",
]
