"""Process-wide handler lists and shared facility instances.

A Registry holds the state every Log and Trace instance shares: the global
handler lists and the shared instances used by the name-free helpers in
:mod:`tracelog.core.logs` and :mod:`tracelog.core.traces`. Facilities created
without an explicit registry use the module-level default, resolved at
dispatch time so that :func:`set_registry` takes effect immediately.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from typing import TYPE_CHECKING

from tracelog.core.config import TracelogConfig
from tracelog.core.models import Message, Signpost
from tracelog.core.ports import LogHandler, TraceHandler

if TYPE_CHECKING:
    from tracelog.core.logger import Log
    from tracelog.core.tracer import Trace

logger = logging.getLogger("tracelog")

SHARED_LOG_NAME = "Log"
SHARED_TRACE_NAME = ""


class Registry:
    """Explicit container for process-wide logging and tracing state.

    Handler lists are append-only and guarded by a lock. Dispatch iterates a
    snapshot, so handlers registered while a record is being delivered only
    see subsequent records.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._log_handlers: list[LogHandler] = []
        self._trace_handlers: list[TraceHandler] = []
        self._shared_log: Log | None = None
        self._shared_trace: Trace | None = None

    @classmethod
    def from_config(cls, config: TracelogConfig) -> Registry:
        """Create a registry with the shared facilities configured.

        Args:
            config: Threshold, emoji flag and default handler settings.

        Returns:
            A new Registry.
        """
        from tracelog.adapters.console import ConsoleTraceHandler
        from tracelog.adapters.logging import SystemLogHandler

        registry = cls()
        registry.shared_log.level = config.level
        registry.shared_log.use_emoji = config.use_emoji
        if config.default_handlers:
            registry.add_log_handler(SystemLogHandler(config.subsystem))
            registry.add_trace_handler(ConsoleTraceHandler())
        return registry

    # === Handler lists ===

    @property
    def log_handlers(self) -> list[LogHandler]:
        """Snapshot of the process-wide log handlers."""
        with self._lock:
            return list(self._log_handlers)

    @property
    def trace_handlers(self) -> list[TraceHandler]:
        """Snapshot of the process-wide trace handlers."""
        with self._lock:
            return list(self._trace_handlers)

    def add_log_handler(self, handler: LogHandler) -> None:
        """Add a handler receiving messages from every Log using this registry."""
        with self._lock:
            self._log_handlers.append(handler)

    def add_trace_handler(self, handler: TraceHandler) -> None:
        """Add a handler receiving signposts from every Trace using this registry."""
        with self._lock:
            self._trace_handlers.append(handler)

    # === Shared instances ===

    @property
    def shared_log(self) -> Log:
        """Log instance used by the name-free helpers."""
        with self._lock:
            if self._shared_log is None:
                from tracelog.core.logger import Log

                self._shared_log = Log(SHARED_LOG_NAME, registry=self)
            return self._shared_log

    @property
    def shared_trace(self) -> Trace:
        """Trace instance used by the name-free helpers."""
        with self._lock:
            if self._shared_trace is None:
                from tracelog.core.tracer import Trace

                self._shared_trace = Trace(SHARED_TRACE_NAME, registry=self)
            return self._shared_trace

    # === Dispatch ===

    def dispatch_message(
        self, message: Message, handlers: Iterable[LogHandler] = ()
    ) -> None:
        """Deliver a message to ``handlers`` then to the process-wide handlers.

        Args:
            message: The message to deliver.
            handlers: Instance-scoped handlers, invoked first.
        """
        for handler in [*handlers, *self.log_handlers]:
            try:
                handler.handle(message)
            except Exception:
                logger.exception(
                    "Log handler %r failed for category %r", handler, message.category
                )

    def dispatch_signpost(self, trace: Trace, signpost: Signpost) -> None:
        """Deliver a signpost to the process-wide trace handlers."""
        for handler in self.trace_handlers:
            try:
                handler.handle(trace, signpost)
            except Exception:
                logger.exception(
                    "Trace handler %r failed for signpost %r", handler, signpost.name
                )

    def close(self) -> None:
        """Drop every handler and clear the shared trace averages."""
        with self._lock:
            self._log_handlers.clear()
            self._trace_handlers.clear()
            shared_trace = self._shared_trace
        if shared_trace is not None:
            shared_trace.reset()


_default_lock = threading.Lock()
_default: Registry | None = None


def get_registry() -> Registry:
    """Return the default registry, creating it from the environment if needed."""
    global _default
    with _default_lock:
        if _default is None:
            _default = Registry.from_config(TracelogConfig.from_env())
        return _default


def set_registry(registry: Registry | None) -> Registry | None:
    """Install ``registry`` as the default and return the previous one.

    Passing None makes the next get_registry() call build a fresh registry
    from the environment.
    """
    global _default
    with _default_lock:
        previous, _default = _default, registry
    return previous


def reset_registry() -> Registry:
    """Replace the default registry with a fresh one built from the environment."""
    registry = Registry.from_config(TracelogConfig.from_env())
    previous = set_registry(registry)
    if previous is not None:
        previous.close()
    return registry
