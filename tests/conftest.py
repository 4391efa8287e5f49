"""Shared test fixtures for all test modules."""

from collections.abc import Generator

import pytest

from tracelog.adapters.capture import InMemoryLogHandler, InMemoryTraceHandler
from tracelog.core.registry import Registry, set_registry


@pytest.fixture
def registry() -> Registry:
    """Provide an empty registry with no process-wide handlers."""
    return Registry()


@pytest.fixture
def default_registry(registry: Registry) -> Generator[Registry, None, None]:
    """Install ``registry`` as the default for the duration of a test."""
    previous = set_registry(registry)
    yield registry
    set_registry(previous)


@pytest.fixture
def log_capture(registry: Registry) -> InMemoryLogHandler:
    """In-memory handler registered as a process-wide log handler."""
    handler = InMemoryLogHandler()
    registry.add_log_handler(handler)
    return handler


@pytest.fixture
def trace_capture(registry: Registry) -> InMemoryTraceHandler:
    """In-memory handler registered as a process-wide trace handler."""
    handler = InMemoryTraceHandler()
    registry.add_trace_handler(handler)
    return handler
