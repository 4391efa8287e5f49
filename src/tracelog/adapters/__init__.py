"""Handler adapters implementing core ports."""

from tracelog.adapters.capture import (
    InMemoryLogHandler,
    InMemoryTraceHandler,
    RingBufferLogHandler,
    RingBufferTraceHandler,
)
from tracelog.adapters.console import ConsoleLogHandler, ConsoleTraceHandler
from tracelog.adapters.logging import (
    SystemLogHandler,
    SystemTraceHandler,
    TracelogHandler,
)

__all__ = [
    "ConsoleLogHandler",
    "ConsoleTraceHandler",
    "InMemoryLogHandler",
    "InMemoryTraceHandler",
    "RingBufferLogHandler",
    "RingBufferTraceHandler",
    "SystemLogHandler",
    "SystemTraceHandler",
    "TracelogHandler",
]
