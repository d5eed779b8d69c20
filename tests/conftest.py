# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures for the metriclog tests."""

import logging
from typing import List, Optional, Set, Tuple

import pytest

from metriclog.core import Level, Logger


class RecordingBackend:
    """In-memory backend that records everything forwarded to it."""

    def __init__(self, name: str = "recording", enabled: Optional[Set[Level]] = None):
        self.name = name
        self.enabled = set(Level) if enabled is None else enabled
        self.records: List[Tuple[Level, str, Optional[BaseException]]] = []
        self.checks: List[Level] = []
        self.stacklevels: List[int] = []

    def is_level_enabled(self, level: Level) -> bool:
        self.checks.append(level)
        return level in self.enabled

    def log_at_level(
        self,
        level: Level,
        message: str,
        cause: Optional[BaseException] = None,
        stacklevel: int = 1,
    ) -> None:
        self.records.append((level, message, cause))
        self.stacklevels.append(stacklevel)


@pytest.fixture
def recording_backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def recording_logger(recording_backend: RecordingBackend) -> Logger:
    return Logger(recording_backend)


@pytest.fixture
def restore_root_logger():
    """Restore root handlers and level after tests that call setup_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def backend_factory():
    """Factory for recording backends with a chosen set of enabled levels."""
    return RecordingBackend
