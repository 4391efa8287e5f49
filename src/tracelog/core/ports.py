"""Port interfaces for handlers.

These protocols define the contracts that handler adapters must implement.
The facilities depend only on these interfaces, not concrete implementations.
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from tracelog.core.models import Message, Signpost

if TYPE_CHECKING:
    from tracelog.core.tracer import Trace


@runtime_checkable
class LogHandler(Protocol):
    """Port for receiving log messages.

    Handlers are invoked synchronously on the logging thread.
    Examples: ConsoleLogHandler, SystemLogHandler, InMemoryLogHandler.
    """

    def handle(self, message: Message) -> None:
        """Handle a single log message."""
        ...


@runtime_checkable
class TraceHandler(Protocol):
    """Port for receiving trace signposts.

    Examples: ConsoleTraceHandler, SystemTraceHandler, InMemoryTraceHandler.
    """

    def handle(self, trace: "Trace", signpost: Signpost) -> None:
        """Handle a signpost emitted by ``trace``.

        Args:
            trace: The Trace instance that emitted the signpost.
            signpost: The completed span or event.
        """
        ...
