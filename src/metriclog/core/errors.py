# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0


class MetricLogError(Exception):
    """Base exception class for metriclog errors.

    Every error raised by this package derives from this class so callers can
    catch them in one place.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidMessagesError(MetricLogError, ValueError):
    """Raised when the message collection passed to the facade is absent."""

    def __init__(self, message: str = "'messages' cannot be None"):
        super().__init__(message)


LEVEL_NAMES = ("debug", "info", "warn", "error", "fatal")


class InvalidLevelError(MetricLogError, ValueError):
    """Raised when a level name cannot be mapped to a logging level."""

    def __init__(self, level: str):
        self.level = level
        self.expected = LEVEL_NAMES
        message = f"Unknown log level: {level!r}"
        suggestion = f"Expected one of: {', '.join(LEVEL_NAMES)}."
        super().__init__(f"{message}\n{suggestion}")
