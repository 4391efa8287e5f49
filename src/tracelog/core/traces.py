"""Trace helper functions bound to the shared Trace instance."""

from collections.abc import Generator
from contextlib import contextmanager

from tracelog.core.models import Signpost
from tracelog.core.ports import TraceHandler
from tracelog.core.registry import get_registry
from tracelog.core.tracer import Trace


def shared() -> Trace:
    """Return the shared Trace instance of the default registry."""
    return get_registry().shared_trace


def begin(name: str, at: float | None = None) -> None:
    """Open a span on the shared Trace instance."""
    shared().begin(name, at)


def end(name: str, at: float | None = None) -> Signpost | None:
    """Close a span on the shared Trace instance."""
    return shared().end(name, at)


def event(name: str, at: float | None = None) -> Signpost:
    """Report an instantaneous signpost on the shared Trace instance."""
    return shared().event(name, at)


def reset() -> None:
    """Reset the averages of the shared Trace instance."""
    shared().reset()


@contextmanager
def span(name: str) -> Generator[None, None, None]:
    """Context manager timing ``name`` on the shared Trace instance.

    Args:
        name: Name of the span

    Yields:
        Nothing; the span ends when the block exits, even on error
    """
    with shared().span(name):
        yield


def add_global_handler(handler: TraceHandler) -> None:
    """Add a handler receiving signposts from every Trace instance."""
    get_registry().add_trace_handler(handler)
