# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

import sys

from cyclopts import App

from .commands import check_config, emit_message
from metriclog import __version__


app = App(version=__version__)
app.command(
    check_config,
    "check",
)
app.command(
    emit_message,
    "emit",
)


if __name__ == "__main__":
    sys.exit(app())
