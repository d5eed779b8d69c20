# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Backend capability used by the logging facade.

The facade only needs two things from whatever performs the actual logging:
a way to ask whether a level is enabled and a way to hand over a finished
message. Any object providing these can stand in for the standard library.
"""

import logging
from enum import Enum
from typing import Optional, Protocol, runtime_checkable

from .errors import InvalidLevelError


class Level(Enum):
    """Levels exposed by the facade, valued by their ``logging`` numbers."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR

    @classmethod
    def from_name(cls, name: str) -> "Level":
        """Parse a level name such as ``"info"`` or ``"WARN"``.

        ``warning`` is accepted for ``WARN`` and ``fatal`` maps to ``ERROR``
        since there is no separate fatal level.

        Raises:
            InvalidLevelError: If the name is not a known level.
        """
        key = name.strip().upper() if isinstance(name, str) else ""
        key = _LEVEL_ALIASES.get(key, key)
        try:
            return cls[key]
        except KeyError:
            raise InvalidLevelError(name) from None


_LEVEL_ALIASES = {"WARNING": "WARN", "FATAL": "ERROR"}


@runtime_checkable
class LogBackend(Protocol):
    """Minimal interface the facade delegates to."""

    name: str

    def is_level_enabled(self, level: Level) -> bool: ...

    def log_at_level(
        self,
        level: Level,
        message: str,
        cause: Optional[BaseException] = None,
        stacklevel: int = 1,
    ) -> None: ...


class StdlibBackend:
    """Backend adapter over a :class:`logging.Logger`."""

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    @classmethod
    def for_name(cls, name: str) -> "StdlibBackend":
        """Resolve the backend for ``name`` through ``logging.getLogger``."""
        return cls(logging.getLogger(name))

    @property
    def name(self) -> str:
        return self._logger.name

    @property
    def logger(self) -> logging.Logger:
        """The wrapped standard library logger."""
        return self._logger

    def is_level_enabled(self, level: Level) -> bool:
        return self._logger.isEnabledFor(level.value)

    def log_at_level(
        self,
        level: Level,
        message: str,
        cause: Optional[BaseException] = None,
        stacklevel: int = 1,
    ) -> None:
        """Forward to the wrapped logger.

        ``stacklevel`` 1 reports the caller of this method as the record
        location.
        """
        self._logger.log(
            level.value, message, exc_info=cause, stacklevel=stacklevel + 1
        )

    def __repr__(self) -> str:
        return f"StdlibBackend({self._logger.name!r})"
