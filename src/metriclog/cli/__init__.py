# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface for metriclog.

Validates logging configuration files and emits test messages through the
logging facade.
"""

from metriclog.cli.main import app

__all__ = ["app"]
