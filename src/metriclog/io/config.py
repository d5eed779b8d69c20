# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Parser for logging configuration in TOML format.

Example file::

    [logging]
    level = "debug"
    file_name = "plugin.log"
    file_path = "/var/log/plugin"
    limit_kbytes = 10240
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import toml
from pydantic import BaseModel, Field, ValidationError, field_validator

from metriclog.core import Level, logger

from .errors import (
    ConfigValidationError,
    ConfigFileNotFoundError,
    InvalidTomlError,
)


class LoggingConfig(BaseModel):
    """Process-wide logging settings, applied once by ``setup_logging``."""

    level: str = Field(
        default="info",
        description="Global level: debug, info, warn, error or fatal.",
    )
    console: bool = Field(default=True, description="Log to the console.")
    file_name: str = Field(
        default="metriclog.log",
        description="Log file name. An empty name disables file logging.",
    )
    file_path: Path = Field(
        default=Path("logs"), description="Directory holding the log file."
    )
    limit_kbytes: int = Field(
        default=25600,
        ge=0,
        description="File size in kilobytes at which the log rolls over (0 = never).",
    )
    backup_count: int = Field(
        default=1, ge=0, description="Number of rolled over files to keep."
    )

    model_config = {"extra": "forbid"}

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        Level.from_name(value)
        return value.strip().lower()

    @property
    def log_level(self) -> Level:
        """The configured level as a facade :class:`Level`."""
        return Level.from_name(self.level)

    @property
    def log_file(self) -> Optional[Path]:
        """Full path of the log file, or None when file logging is off."""
        if not self.file_name:
            return None
        return self.file_path / self.file_name


class ConfigParser:
    """Parser for TOML files holding a ``[logging]`` table."""

    SECTION = "logging"

    def __init__(self, file_path: Union[str, Path]):
        """Initialize the config parser.

        Args:
            file_path: Path to the TOML config file

        Raises:
            ConfigFileNotFoundError: If the path is missing or not a file
            InvalidTomlError: If the TOML is malformed
        """
        self.file_path = Path(file_path)
        if not self.file_path.is_file():
            raise ConfigFileNotFoundError(str(self.file_path))

        try:
            with open(self.file_path, "r") as f:
                self.raw_data = toml.load(f)
        except toml.TomlDecodeError as e:
            raise InvalidTomlError(f"Invalid TOML format: {e}", str(self.file_path))

        self._validate_structure()

    def _validate_structure(self) -> None:
        """Warns about top-level tables other than ``[logging]``."""
        unknown_sections = [
            section for section in self.raw_data if section != self.SECTION
        ]
        if unknown_sections:
            logger.warn(
                "Unknown config sections found and ignored: ",
                ", ".join(unknown_sections),
            )

    def get_raw_data(self) -> Dict[str, Any]:
        return self.raw_data

    def parse(self) -> LoggingConfig:
        """Parse the ``[logging]`` table into a LoggingConfig.

        A missing table yields the defaults.

        Raises:
            ConfigValidationError: If the table is not a table or holds
                invalid values.
        """
        section_data = self.raw_data.get(self.SECTION)
        if section_data is None:
            return LoggingConfig()

        if not isinstance(section_data, dict):
            raise ConfigValidationError(
                f"Invalid format for section '{self.SECTION}'. Expected a table, "
                f"got {type(section_data).__name__}.",
                str(self.file_path),
            )

        try:
            return LoggingConfig(**section_data)
        except ValidationError as e:
            error_msgs = [
                f"  - {'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in e.errors()
            ]
            raise ConfigValidationError(
                f"Invalid logging configuration in '{self.file_path}':\n"
                + "\n".join(error_msgs),
                str(self.file_path),
            ) from e


def load_config(file_path: Union[str, Path]) -> LoggingConfig:
    """Load and validate a logging configuration file."""
    return ConfigParser(file_path).parse()
