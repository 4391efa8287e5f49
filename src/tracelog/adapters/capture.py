"""Capturing handlers that keep records in memory.

Useful in tests and for low-volume applications that want to inspect
recent output. The ring buffer variants are bounded and evict the oldest
record when full.
"""

import threading
from collections import deque
from typing import TYPE_CHECKING

from tracelog.core.models import Level, Message, Signpost

if TYPE_CHECKING:
    from tracelog.core.tracer import Trace


class InMemoryLogHandler:
    """In-memory implementation of LogHandler.

    Stores every message in a list, in the order received.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._messages: list[Message] = []

    def handle(self, message: Message) -> None:
        """Store a message."""
        with self._lock:
            self._messages.append(message)

    @property
    def messages(self) -> list[Message]:
        """Snapshot of the stored messages, oldest first."""
        with self._lock:
            return list(self._messages)

    def at_level(self, level: Level) -> list[Message]:
        """Return stored messages with exactly the given level."""
        return [m for m in self.messages if m.level is level]

    def clear(self) -> None:
        """Drop every stored message."""
        with self._lock:
            self._messages.clear()


class InMemoryTraceHandler:
    """In-memory implementation of TraceHandler.

    Stores every signpost together with the Trace that emitted it.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: list[tuple["Trace", Signpost]] = []

    def handle(self, trace: "Trace", signpost: Signpost) -> None:
        """Store a signpost."""
        with self._lock:
            self._records.append((trace, signpost))

    @property
    def signposts(self) -> list[Signpost]:
        """Snapshot of the stored signposts, oldest first."""
        with self._lock:
            return [signpost for _, signpost in self._records]

    @property
    def records(self) -> list[tuple["Trace", Signpost]]:
        """Snapshot of ``(trace, signpost)`` pairs, oldest first."""
        with self._lock:
            return list(self._records)

    def named(self, name: str) -> list[Signpost]:
        """Return stored signposts with the given trace name."""
        return [s for s in self.signposts if s.name == name]

    def clear(self) -> None:
        """Drop every stored signpost."""
        with self._lock:
            self._records.clear()


class RingBufferLogHandler:
    """Ring buffer implementation of LogHandler.

    Stores messages in a fixed-size circular buffer. When the buffer is
    full, the oldest message is evicted to make room for the new one.

    Args:
        max_size: Maximum number of messages to keep.
    """

    def __init__(self, max_size: int) -> None:
        self._lock = threading.Lock()
        self._buffer: deque[Message] = deque(maxlen=max_size)

    def handle(self, message: Message) -> None:
        """Store a message, evicting the oldest if full."""
        with self._lock:
            self._buffer.append(message)

    @property
    def messages(self) -> list[Message]:
        """Snapshot of the buffered messages, oldest first."""
        with self._lock:
            return list(self._buffer)

    def clear(self) -> None:
        """Drop every buffered message."""
        with self._lock:
            self._buffer.clear()


class RingBufferTraceHandler:
    """Ring buffer implementation of TraceHandler.

    Args:
        max_size: Maximum number of signposts to keep.
    """

    def __init__(self, max_size: int) -> None:
        self._lock = threading.Lock()
        self._buffer: deque[Signpost] = deque(maxlen=max_size)

    def handle(self, trace: "Trace", signpost: Signpost) -> None:
        """Store a signpost, evicting the oldest if full."""
        with self._lock:
            self._buffer.append(signpost)

    @property
    def signposts(self) -> list[Signpost]:
        """Snapshot of the buffered signposts, oldest first."""
        with self._lock:
            return list(self._buffer)

    def clear(self) -> None:
        """Drop every buffered signpost."""
        with self._lock:
            self._buffer.clear()
