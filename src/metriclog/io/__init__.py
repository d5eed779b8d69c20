# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from .config import ConfigParser, LoggingConfig, load_config
from .errors import (
    ConfigError,
    ConfigFileNotFoundError,
    InvalidTomlError,
    ConfigValidationError,
)

__all__ = [
    "ConfigParser",
    "LoggingConfig",
    "load_config",
    "ConfigError",
    "ConfigFileNotFoundError",
    "InvalidTomlError",
    "ConfigValidationError",
]
