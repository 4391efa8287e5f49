"""Leveled log facility."""

from __future__ import annotations

import inspect
import logging
import threading
import time
from typing import Any

from tracelog.core import callsite
from tracelog.core.callsite import CallSite
from tracelog.core.formatting import describe_message
from tracelog.core.models import Level, Message
from tracelog.core.ports import LogHandler
from tracelog.core.registry import Registry, get_registry

logger = logging.getLogger("tracelog")


def _is_deferred(message: Any) -> bool:
    """Return True if ``message`` is a callable that can be called without arguments.

    Classes are never treated as deferred messages.
    """
    if not callable(message) or isinstance(message, type):
        return False
    try:
        inspect.signature(message).bind()
    except TypeError:
        return False
    except ValueError:
        # No signature available, e.g. some builtins
        return True
    return True


def render_message(message: Any) -> str:
    """Return the text of ``message``, evaluating it first if it is deferred.

    A failure while evaluating or stringifying the message is reported on the
    ``tracelog`` logger and replaced by a placeholder text.
    """
    try:
        if _is_deferred(message):
            message = message()
        return str(message)
    except Exception as exc:
        logger.exception("Failed to render log message %r", message)
        return f"<unrenderable message: {exc!r}>"


class Log:
    """A named log that filters by level and fans messages out to handlers.

    Every message passing the threshold goes to this instance's handlers and
    then to the process-wide handlers of the registry, in registration order,
    on the calling thread.

    Example:
        ```python
        from tracelog import InMemoryLogHandler, Level, Log

        log = Log("Network", level=Level.DEBUG)
        log.add_handler(InMemoryLogHandler())
        log.info("connected")
        ```
    """

    def __init__(
        self,
        name: str,
        level: Level = Level.OFF,
        use_emoji: bool = False,
        *,
        registry: Registry | None = None,
    ) -> None:
        """Initialize a Log instance.

        Args:
            name: Name of the log, also the default category of its messages.
            level: Messages below this level are ignored.
            use_emoji: Render level emoji instead of bracketed level names.
            registry: Registry providing the process-wide handlers. Defaults
                to the module-level registry at dispatch time.
        """
        self.name = name
        self.level = level
        self.use_emoji = use_emoji
        self._registry = registry
        self._lock = threading.Lock()
        self._handlers: list[LogHandler] = []

    def __repr__(self) -> str:
        return f"Log({self.name!r}, level={self.level.name})"

    @property
    def registry(self) -> Registry:
        """Registry this instance dispatches through."""
        return self._registry if self._registry is not None else get_registry()

    @property
    def handlers(self) -> list[LogHandler]:
        """Snapshot of the instance-scoped handlers."""
        with self._lock:
            return list(self._handlers)

    def add_handler(self, handler: LogHandler) -> None:
        """Add a handler receiving every message of this instance.

        Duplicates are allowed and are invoked once per registration.
        """
        with self._lock:
            self._handlers.append(handler)

    def is_enabled_for(self, level: Level) -> bool:
        """Return True if a message at ``level`` would be emitted."""
        return level.enabled(self.level)

    def log(
        self,
        message: Any,
        level: Level,
        category: str | None = None,
        *,
        location: str | CallSite | None = None,
        stacklevel: int = 1,
    ) -> Message | None:
        """Log a message at ``level``.

        Args:
            message: Object to log. A callable taking no arguments is only
                called when the level passes the threshold. Classes and
                callables requiring arguments are logged with str().
            level: Severity of the message.
            category: Category of the message, defaults to the log name.
            location: Call-site of the message. Captured from the caller's
                frame when omitted.
            stacklevel: Frames above the caller of this method to report as
                the call-site.

        Returns:
            The dispatched Message, or None if it was filtered out.
        """
        if not self.is_enabled_for(level):
            return None
        if location is None:
            location = callsite.capture(stacklevel)

        timestamp = time.time()
        text = render_message(message)
        where = str(location)
        record = Message(
            category=self.name if category is None else category,
            timestamp=timestamp,
            message=text,
            level=level,
            location=where,
            description=describe_message(level, timestamp, where, text, self.use_emoji),
        )
        self.registry.dispatch_message(record, self.handlers)
        return record

    def error(
        self, message: Any, category: str | None = None, *, stacklevel: int = 1
    ) -> Message | None:
        """Log an error level message."""
        return self.log(message, Level.ERROR, category, stacklevel=stacklevel + 1)

    def warn(
        self, message: Any, category: str | None = None, *, stacklevel: int = 1
    ) -> Message | None:
        """Log a warning level message."""
        return self.log(message, Level.WARN, category, stacklevel=stacklevel + 1)

    def info(
        self, message: Any, category: str | None = None, *, stacklevel: int = 1
    ) -> Message | None:
        """Log an informational message."""
        return self.log(message, Level.INFO, category, stacklevel=stacklevel + 1)

    def debug(
        self, message: Any, category: str | None = None, *, stacklevel: int = 1
    ) -> Message | None:
        """Log a debug level message."""
        return self.log(message, Level.DEBUG, category, stacklevel=stacklevel + 1)

    def verbose(
        self, message: Any, category: str | None = None, *, stacklevel: int = 1
    ) -> Message | None:
        """Log a verbose level message."""
        return self.log(message, Level.VERBOSE, category, stacklevel=stacklevel + 1)
