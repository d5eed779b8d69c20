# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from .logger import LevelAwareFormatter, setup_logging

__all__ = ["LevelAwareFormatter", "setup_logging"]
