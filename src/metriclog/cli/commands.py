# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Commands of the metriclog CLI."""

from pathlib import Path
from typing import Annotated, Optional

from cyclopts import Parameter
from rich.console import Console
from rich.table import Table

from metriclog import __app_name__
from metriclog.core import Level, getLogger

from .errors import error_handler
from .utils import CommonParameters, configure_from_cli, resolve_config

console = Console()


@error_handler
def check_config(
    config: Path,
    *,
    common: CommonParameters | None = None,
) -> int:
    """
    Validate a logging config file and print the effective settings.

    Args:
        config: Path to a TOML file with a [logging] table.
    Returns:
        int: 0 for success, 1 for errors.
    Examples:
        metriclog check logging.toml
    """
    effective = resolve_config(config, common)

    table = Table(title=f"Logging settings from {config}")
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    table.add_row("level", effective.level)
    table.add_row("console", str(effective.console))
    table.add_row("log file", str(effective.log_file) if effective.log_file else "disabled")
    table.add_row(
        "rollover",
        f"{effective.limit_kbytes} KB" if effective.limit_kbytes else "never",
    )
    table.add_row("backups", str(effective.backup_count))
    console.print(table)
    return 0


@error_handler
def emit_message(
    level: str,
    *messages: str,
    config: Optional[Path] = None,
    name: Annotated[str, Parameter(name=["-n", "--name"])] = __app_name__,
    common: CommonParameters | None = None,
) -> int:
    """
    Configure logging and send a message through the facade.

    Useful to check where output ends up for a given configuration.

    Args:
        level: One of debug, info, warn, error or fatal.
        messages: Message parts, concatenated without a separator.
        config: Path to a TOML config file. Defaults apply when omitted.
        name: Logger name to log under.
    Returns:
        int: 0 for success, 1 for errors.
    Examples:
        metriclog emit info "poll " "finished"
        metriclog emit debug "cycle done" --config logging.toml --verbose
    """
    Level.from_name(level)
    configure_from_cli(config, common)

    logger = getLogger(name)
    log_method = getattr(logger, level.strip().lower())
    log_method(*messages)
    return 0
