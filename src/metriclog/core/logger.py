# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Leveled logging facade.

Usage::

    from metriclog import getLogger

    logger = getLogger(__name__)
    logger.debug("polled ", count, " metrics")
    logger.error(exc, "publish failed for ", component, "\\tretrying")

Every level method concatenates its arguments with ``str()`` and no separator,
but only after the backend confirmed the level is enabled. An exception passed
as the first argument is attached to the record instead of being part of the
message.
"""

from types import ModuleType
from typing import Any, Iterable, Optional, Tuple

from metriclog import __app_name__

from .backend import Level, LogBackend, StdlibBackend
from .errors import InvalidMessagesError


def build_message(messages: Optional[Iterable[Any]]) -> str:
    """Concatenate the string form of every element in order.

    Args:
        messages: The values making up the message. ``None`` elements render
            as ``"None"``.

    Returns:
        The concatenated message, ``""`` for an empty collection.

    Raises:
        InvalidMessagesError: If ``messages`` itself is None.
    """
    if messages is None:
        raise InvalidMessagesError()
    return "".join(str(message) for message in messages)


def _split_cause(
    args: Tuple[Any, ...],
) -> Tuple[Optional[BaseException], Tuple[Any, ...]]:
    if args and isinstance(args[0], BaseException):
        return args[0], args[1:]
    return None, args


class Logger:
    """Facade supporting logging at debug, info, warn, error and fatal levels.

    A facade wraps exactly one backend, fixed at construction. Obtain one per
    module or class through :func:`getLogger` rather than constructing it
    directly, unless a custom :class:`LogBackend` is wanted.
    """

    __slots__ = ("_backend",)

    def __init__(self, backend: LogBackend):
        self._backend = backend

    @property
    def name(self) -> str:
        """Name of the backend logger."""
        return self._backend.name

    @property
    def backend(self) -> LogBackend:
        """The backend this facade forwards to."""
        return self._backend

    def is_enabled(self, level: Level) -> bool:
        """Whether a message at ``level`` would be forwarded."""
        return self._backend.is_level_enabled(level)

    def log(
        self,
        level: Level,
        messages: Optional[Iterable[Any]],
        cause: Optional[BaseException] = None,
        stacklevel: int = 1,
    ) -> None:
        """Log a message collection at ``level``, optionally with a cause.

        Nothing is built when the level is disabled, so an invalid collection
        only raises for enabled levels.

        Args:
            level: Level to log at.
            messages: Values concatenated into the message.
            cause: Exception attached to the record.
            stacklevel: Frame reported as the record location, counted as in
                ``logging``: 1 is the caller of this method.

        Raises:
            InvalidMessagesError: If the level is enabled and ``messages`` is None.
        """
        if not self._backend.is_level_enabled(level):
            return
        self._backend.log_at_level(
            level, build_message(messages), cause, stacklevel=stacklevel + 1
        )

    def _log_args(self, level: Level, args: Tuple[Any, ...]) -> None:
        # Called directly by the public level methods; reports their caller
        cause, messages = _split_cause(args)
        self.log(level, messages, cause, stacklevel=3)

    def debug(self, *messages: Any) -> None:
        """Log at the debug level. A leading exception is attached as the cause."""
        self._log_args(Level.DEBUG, messages)

    def info(self, *messages: Any) -> None:
        """Log at the info level. A leading exception is attached as the cause."""
        self._log_args(Level.INFO, messages)

    def warn(self, *messages: Any) -> None:
        """Log at the warn level. A leading exception is attached as the cause."""
        self._log_args(Level.WARN, messages)

    warning = warn

    def error(self, *messages: Any) -> None:
        """Log at the error level. A leading exception is attached as the cause."""
        self._log_args(Level.ERROR, messages)

    def fatal(self, *messages: Any) -> None:
        """Log at the fatal level.

        Note: fatal currently logs at the same level as error. This may change
        in a future release.
        """
        self._log_args(Level.ERROR, messages)

    def __repr__(self) -> str:
        return f"Logger({self._backend.name!r})"


def _resolve_name(identifier: Any) -> str:
    if identifier is None:
        return __app_name__
    if isinstance(identifier, str):
        return identifier
    if isinstance(identifier, ModuleType):
        return identifier.__name__
    klass = identifier if isinstance(identifier, type) else type(identifier)
    return f"{klass.__module__}.{klass.__qualname__}"


def getLogger(identifier: Any = None) -> Logger:
    """Get a facade for a specific name, class or module.

    For better visibility into where messages come from, create one logger per
    module (``getLogger(__name__)``) or per class (``getLogger(MyAgent)``).
    Facades for the same identifier share the same backend logger.

    Args:
        identifier: A logger name, a class (named ``module.QualName``), a
            module, or any other object (named after its class). Defaults to
            the package logger ``"metriclog"``.

    Returns:
        A Logger bound to the resolved backend.
    """
    return Logger(StdlibBackend.for_name(_resolve_name(identifier)))


# Create the default logger instance
logger = getLogger()
