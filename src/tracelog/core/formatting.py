"""Rendering helpers shared by log messages and signposts."""

import os
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tracelog.core.models import Level

UNKNOWN_LOCATION = "Unknown Object"


def duration_string(seconds: float) -> str:
    """Render a duration for humans.

    Args:
        seconds: Duration in seconds.

    Returns:
        Whole milliseconds below one second (``"123 ms"``), otherwise
        seconds with two decimals (``"1.50 s"``).
    """
    if seconds < 1:
        return f"{seconds * 1000:.0f} ms"
    return f"{seconds:.2f} s"


def timestamp_string(timestamp: float) -> str:
    """Render a Unix timestamp in local time as ``YYYY-MM-DD H:M:SS.ffff``."""
    dt = datetime.fromtimestamp(timestamp)
    return (
        f"{dt:%Y-%m-%d} {dt.hour}:{dt.minute}:{dt:%S}.{dt.microsecond // 100:04d}"
    )


def location_string(filename: str | None, function: str | None, line: int) -> str:
    """Render a call-site as ``"<file> <function> line <line>"``.

    Only the base name of ``filename`` is kept. A missing filename renders as
    ``"Unknown Object"``. A missing function is left out.
    """
    name = os.path.basename(filename) if filename else ""
    parts = [name or UNKNOWN_LOCATION, function, f"line {line}"]
    return " ".join(part for part in parts if part)


def describe_message(
    level: "Level",
    timestamp: float,
    location: str,
    message: str,
    use_emoji: bool = False,
) -> str:
    """Render a full log line.

    Args:
        level: Severity of the message.
        timestamp: Unix timestamp of the message.
        location: Preformatted call-site.
        message: The message text.
        use_emoji: Use the level's emoji instead of its bracketed name.

    Returns:
        ``"<marker> <timestamp> <location>:\\n<message>"``
    """
    return (
        f"{level.marker(use_emoji)} {timestamp_string(timestamp)} {location}:\n"
        f"{message}"
    )
