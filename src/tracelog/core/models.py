"""Core domain models for log messages and trace signposts."""

from dataclasses import dataclass
from enum import Enum, IntEnum

from tracelog.core.formatting import duration_string

_LABELS = {
    0: "Verbose",
    1: "Debug",
    2: "Info",
    3: "Warn",
    4: "Error",
    5: "Disabled",
}

_EMOJI = {
    0: "📖",
    1: "🐝",
    2: "✏️",
    3: "⚠️",
    4: "⁉️",
    5: "",
}

# Accepted spellings beyond the member names themselves
_ALIASES = {
    "TRACE": "VERBOSE",
    "WARNING": "WARN",
    "DISABLED": "OFF",
}


class Level(IntEnum):
    """Severity of a log message, ordered from most to least detailed.

    ``OFF`` is only meaningful as a threshold: a facility whose threshold is
    ``OFF`` emits nothing, not even errors.
    """

    VERBOSE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    OFF = 5

    @property
    def label(self) -> str:
        """Display friendly name of the level."""
        return _LABELS[self.value]

    @property
    def emoji(self) -> str:
        """Emoji glyph for the level (empty for OFF)."""
        return _EMOJI[self.value]

    def marker(self, use_emoji: bool = False) -> str:
        """Return the prefix used in rendered log lines.

        Args:
            use_emoji: Render the emoji glyph instead of the bracketed name.

        Returns:
            The emoji glyph, or the upper-cased label between pipes
            (e.g. ``|INFO|``).
        """
        if use_emoji:
            return self.emoji
        return f"|{self.label.upper()}|"

    def enabled(self, threshold: "Level") -> bool:
        """Return True if a message at this level passes ``threshold``."""
        if threshold is Level.OFF or self is Level.OFF:
            return False
        return self >= threshold

    @classmethod
    def parse(
        cls, value: "Level | int | str | None", default: "Level | None" = None
    ) -> "Level | None":
        """Parse a level from a member, an integer rank or a name.

        Names are matched case-insensitively and a few common aliases are
        accepted (``warning``, ``trace``, ``disabled``).

        Args:
            value: The value to parse.
            default: Returned when the value is missing or not recognised.

        Returns:
            The matching Level, or ``default``.
        """
        if isinstance(value, Level):
            return value
        if isinstance(value, bool) or value is None:
            return default
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                return default
        if isinstance(value, str):
            key = value.strip().upper()
            key = _ALIASES.get(key, key)
            if key.isdigit():
                return cls.parse(int(key), default)
            try:
                return cls[key]
            except KeyError:
                return default
        return default


class TraceType(Enum):
    """Kind of trace operation reported to span observers."""

    BEGIN = "begin"
    END = "end"
    EVENT = "event"


@dataclass(frozen=True)
class Message:
    """A single log line produced by a Log facility.

    Attributes:
        category: Category of the message, usually the facility name.
        timestamp: Unix timestamp in seconds when the message was built.
        message: The raw message text.
        level: Severity of the message.
        location: Human readable call-site (file, function and line).
        description: Fully rendered log line.
    """

    category: str
    timestamp: float
    message: str
    level: Level
    location: str
    description: str

    def __str__(self) -> str:
        return self.description


@dataclass
class Signpost:
    """A completed span or an instantaneous trace event.

    Attributes:
        name: Name of the trace, unique among the open spans of a Trace.
        category: Category of the trace, usually the facility name.
        started: Unix timestamp when the span began.
        ended: Unix timestamp when the span ended.
        average_duration: Average duration of every completed span with the
            same name, in seconds. None for events.
    """

    name: str
    category: str = ""
    started: float = 0.0
    ended: float = 0.0
    average_duration: float | None = None

    @property
    def duration(self) -> float:
        """How long the span took, in seconds."""
        return self.ended - self.started

    @property
    def description(self) -> str:
        """User friendly description of the signpost."""
        prefix = f"[{self.category}] " if self.category else ""
        text = f"{prefix}{self.name}: {duration_string(self.duration)}"
        if self.average_duration is not None:
            text += f"\nAverage: {duration_string(self.average_duration)}"
        return text

    def __str__(self) -> str:
        return self.description
