# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Leveled logging facade for metric publishing plugins."""

__app_name__ = "metriclog"
__version__ = "1.0.0"

from metriclog.core import (  # noqa: E402
    Level,
    LogBackend,
    Logger,
    MetricLogError,
    InvalidMessagesError,
    getLogger,
)
from metriclog.io import LoggingConfig, load_config  # noqa: E402
from metriclog.utils import setup_logging  # noqa: E402

__all__ = [
    "__app_name__",
    "__version__",
    "Level",
    "LogBackend",
    "Logger",
    "MetricLogError",
    "InvalidMessagesError",
    "LoggingConfig",
    "getLogger",
    "load_config",
    "setup_logging",
]
