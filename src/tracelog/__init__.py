"""tracelog - leveled logging and named-span tracing with pluggable handlers."""

import logging

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
from tracelog.core import logs, traces
from tracelog.core.callsite import CallSite
from tracelog.core.config import TracelogConfig
from tracelog.core.formatting import duration_string
from tracelog.core.logger import Log
from tracelog.core.logs import debug, error, info, log, verbose, warn
from tracelog.core.models import Level, Message, Signpost, TraceType
from tracelog.core.ports import LogHandler, TraceHandler
from tracelog.core.registry import (
    Registry,
    get_registry,
    reset_registry,
    set_registry,
)
from tracelog.core.tracer import Trace
from tracelog.core.traces import begin, end, event, span

logging.getLogger("tracelog").addHandler(logging.NullHandler())

__all__ = [
    # Models
    "CallSite",
    "Level",
    "Message",
    "Signpost",
    "TraceType",
    # Ports
    "LogHandler",
    "TraceHandler",
    # Facilities
    "Log",
    "Trace",
    "Registry",
    "TracelogConfig",
    "get_registry",
    "reset_registry",
    "set_registry",
    # Shared-instance helpers
    "logs",
    "traces",
    "log",
    "verbose",
    "debug",
    "info",
    "warn",
    "error",
    "begin",
    "end",
    "event",
    "span",
    "duration_string",
    # Adapters
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
