"""Console handlers writing rendered records to a text stream."""

import sys
from typing import TYPE_CHECKING, TextIO

from tracelog.core.models import Message, Signpost

if TYPE_CHECKING:
    from tracelog.core.tracer import Trace


class ConsoleLogHandler:
    """Writes each message's description to a stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        """Stream written to; stdout is resolved at write time."""
        return self._stream if self._stream is not None else sys.stdout

    def handle(self, message: Message) -> None:
        """Write the rendered message followed by a newline."""
        self.stream.write(message.description + "\n")


class ConsoleTraceHandler:
    """Writes each signpost's description to a stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        """Stream written to; stdout is resolved at write time."""
        return self._stream if self._stream is not None else sys.stdout

    def handle(self, trace: "Trace", signpost: Signpost) -> None:
        """Write the rendered signpost followed by a newline."""
        self.stream.write(signpost.description + "\n")
