# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Optional

from cyclopts import Parameter, Group, validators

from metriclog.io import LoggingConfig, load_config
from metriclog.utils import setup_logging

verbosity_group = Group(
    "Verbosity",
    default_parameter=Parameter(negative=""),  # Disable "--no-" flags
    validator=validators.MutuallyExclusive(),  # Only one option is allowed to be selected.
)


@Parameter(name="*")
@dataclass
class CommonParameters:
    quiet: Annotated[
        bool,
        Parameter(group=verbosity_group, help="Only log errors."),
    ] = False
    verbose: Annotated[
        bool, Parameter(group=verbosity_group, help="Log debug messages.")
    ] = False


def resolve_config(
    config_path: Optional[Path], common: CommonParameters | None = None
) -> LoggingConfig:
    """Load the config file, if any, and apply verbosity overrides.

    Args:
        config_path: Path to a TOML config file, or None for the defaults
        common: Verbosity flags; --quiet forces error, --verbose forces debug

    Returns:
        The effective LoggingConfig
    """
    config = load_config(config_path) if config_path else LoggingConfig()
    if common and common.quiet:
        config = config.model_copy(update={"level": "error"})
    elif common and common.verbose:
        config = config.model_copy(update={"level": "debug"})
    return config


def configure_from_cli(
    config_path: Optional[Path], common: CommonParameters | None = None
) -> LoggingConfig:
    config = resolve_config(config_path, common)
    setup_logging(config)
    return config
