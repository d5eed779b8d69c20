# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Error classes for the metriclog configuration IO."""

from typing import Optional

from metriclog.core import MetricLogError


class ConfigError(MetricLogError):
    """Base class for logging configuration errors.

    ``file_path`` names the offending file when one is known.
    """

    def __init__(self, message: str, file_path: Optional[str] = None):
        self.file_path = file_path
        super().__init__(f"Config error: {message}")


class ConfigFileNotFoundError(ConfigError):
    """Exception raised when a configuration path is missing or not a file."""

    def __init__(self, file_path: str):
        message = f"Config file not found: {file_path}"
        suggestion = "Please check that the path exists and points to a TOML file."
        super().__init__(f"{message}\n{suggestion}", file_path)


class InvalidTomlError(ConfigError):
    """Exception raised when the configuration file is not valid TOML."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration values fail validation."""
