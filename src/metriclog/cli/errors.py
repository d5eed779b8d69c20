# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Error reporting for the metriclog CLI."""

import functools
from typing import Any, Callable, Optional, TypeVar, cast

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from metriclog.core import InvalidLevelError, MetricLogError
from metriclog.io import ConfigError

console = Console()

F = TypeVar("F", bound=Callable[..., Any])

EXIT_FAILURE = 1


def error_panel(error: MetricLogError) -> Panel:
    """Build the panel shown for a metriclog error.

    Level errors list the accepted level names below the message; config
    errors name the file they came from.
    """
    body = Text(error.message)
    subtitle: Optional[str] = None

    if isinstance(error, InvalidLevelError):
        body = Text(f"Unknown log level: {error.level!r}")
        subtitle = "levels: " + ", ".join(error.expected)
    elif isinstance(error, ConfigError) and error.file_path:
        subtitle = f"config: {error.file_path}"

    title = Text.assemble(
        Text("metriclog", style="bold red"),
        " ",
        Text(error.__class__.__name__, style="red"),
    )
    return Panel(
        body,
        title=title,
        subtitle=subtitle,
        border_style="red",
        padding=(1, 2),
    )


def error_handler(func: F) -> F:
    """Turn exceptions raised by a CLI command into exit code 1.

    metriclog errors are shown as a panel; anything else is printed with its
    traceback.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except MetricLogError as e:
            console.print(error_panel(e))
            return EXIT_FAILURE
        except Exception:
            console.print(f"[bold red]Unexpected error in '{func.__name__}'[/bold red]")
            console.print_exception()
            return EXIT_FAILURE

    return cast(F, wrapper)
