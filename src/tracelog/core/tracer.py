"""Named span tracing with running averages."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable, Generator
from contextlib import contextmanager
from dataclasses import dataclass

from tracelog.core.models import Signpost, TraceType
from tracelog.core.registry import Registry, get_registry

logger = logging.getLogger("tracelog")

# Called with the operation and the trace name on every begin/end/event
SpanObserver = Callable[[TraceType, str], None]


@dataclass
class _Accumulator:
    count: int = 0
    total: float = 0.0

    @property
    def average(self) -> float:
        return self.total / self.count


class Trace:
    """Tracks named spans and reports them to the process-wide trace handlers.

    A span is opened by :meth:`begin` and reported by :meth:`end`, together
    with the average duration of every span of the same name completed since
    the last :meth:`reset`. :meth:`event` reports an instantaneous signpost.

    Example:
        ```python
        from tracelog import Trace

        trace = Trace("Startup")
        trace.begin("load config")
        ...
        trace.end("load config")
        ```
    """

    def __init__(
        self,
        name: str = "",
        *,
        registry: Registry | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize a Trace instance.

        Args:
            name: Name of the trace, used as the category of its signposts.
            registry: Registry providing the process-wide trace handlers.
                Defaults to the module-level registry at dispatch time.
            clock: Source of timestamps when none is passed explicitly.
        """
        self.name = name
        self._registry = registry
        self._clock = clock
        self._lock = threading.Lock()
        self._active: dict[str, Signpost] = {}
        self._completed: dict[str, _Accumulator] = {}
        self._observers: list[SpanObserver] = []

    def __repr__(self) -> str:
        return f"Trace({self.name!r})"

    @property
    def registry(self) -> Registry:
        """Registry this instance dispatches through."""
        return self._registry if self._registry is not None else get_registry()

    @property
    def active(self) -> list[str]:
        """Names of the spans that have begun but not ended."""
        with self._lock:
            return list(self._active)

    def average(self, name: str) -> float | None:
        """Average duration of completed spans named ``name``, if any."""
        with self._lock:
            result = self._completed.get(name)
            return result.average if result is not None else None

    def completed(self, name: str) -> int:
        """Number of spans named ``name`` completed since the last reset."""
        with self._lock:
            result = self._completed.get(name)
            return result.count if result is not None else 0

    def add_observer(self, observer: SpanObserver) -> None:
        """Add a callable notified of every begin, end and event call.

        Exceptions raised by an observer are logged and do not reach the caller.
        """
        with self._lock:
            self._observers.append(observer)

    def _notify(self, trace_type: TraceType, name: str) -> None:
        with self._lock:
            observers = list(self._observers)
        for observer in observers:
            try:
                observer(trace_type, name)
            except Exception:
                logger.exception(
                    "Span observer %r failed for %s %r", observer, trace_type.name, name
                )

    def begin(self, name: str, at: float | None = None) -> None:
        """Open a span named ``name``.

        An open span with the same name is replaced.

        Args:
            name: Name of the span.
            at: Timestamp when the span started, defaults to now.
        """
        started = self._clock() if at is None else at
        with self._lock:
            self._active[name] = Signpost(
                name=name, category=self.name, started=started, ended=started
            )
        self._notify(TraceType.BEGIN, name)

    def end(self, name: str, at: float | None = None) -> Signpost | None:
        """Close the span named ``name`` and report it.

        Does nothing if no span with that name is open.

        Args:
            name: Name of the span.
            at: Timestamp when the span ended, defaults to now.

        Returns:
            The reported Signpost, or None if no span was open.
        """
        ended = self._clock() if at is None else at
        with self._lock:
            signpost = self._active.pop(name, None)
            if signpost is not None:
                signpost.ended = ended
                result = self._completed.setdefault(name, _Accumulator())
                result.count += 1
                result.total += signpost.duration
                signpost.average_duration = result.average
        if signpost is not None:
            self.registry.dispatch_signpost(self, signpost)
        self._notify(TraceType.END, name)
        return signpost

    def event(self, name: str, at: float | None = None) -> Signpost:
        """Report an instantaneous signpost named ``name``.

        Any open span with the same name is discarded without being reported.
        Averages are not affected.

        Args:
            name: Name of the event.
            at: Timestamp of the event, defaults to now.

        Returns:
            The reported Signpost.
        """
        timestamp = self._clock() if at is None else at
        with self._lock:
            self._active.pop(name, None)
        signpost = Signpost(
            name=name, category=self.name, started=timestamp, ended=timestamp
        )
        self.registry.dispatch_signpost(self, signpost)
        self._notify(TraceType.EVENT, name)
        return signpost

    def reset(self) -> None:
        """Reset all trace averages of this instance."""
        with self._lock:
            self._completed.clear()

    @contextmanager
    def span(self, name: str) -> Generator[None, None, None]:
        """Context manager that begins ``name`` on entry and ends it on exit."""
        self.begin(name)
        try:
            yield
        finally:
            self.end(name)
