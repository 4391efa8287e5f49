"""Log helper functions bound to the shared Log instance.

These mirror the methods of :class:`tracelog.core.logger.Log` for code that
does not want to hold a Log of its own. Every call resolves the shared
instance of the current default registry.
"""

from typing import Any

from tracelog.core.logger import Log
from tracelog.core.models import Level, Message
from tracelog.core.ports import LogHandler
from tracelog.core.registry import get_registry


def shared() -> Log:
    """Return the shared Log instance of the default registry."""
    return get_registry().shared_log


def log(
    message: Any,
    level: Level,
    category: str | None = None,
    *,
    stacklevel: int = 1,
) -> Message | None:
    """Log a message through the shared Log instance.

    Args:
        message: Object to log, or a zero-argument callable producing it
        level: Severity of the message
        category: Category of the message (default: the shared log's name)
        stacklevel: Frames above the caller to report as the call-site

    Returns:
        The dispatched Message, or None if filtered out
    """
    return shared().log(message, level, category, stacklevel=stacklevel + 1)


def error(
    message: Any, category: str | None = None, *, stacklevel: int = 1
) -> Message | None:
    """Log an ERROR message through the shared Log instance.

    Args:
        message: Object to log, or a zero-argument callable producing it
        category: Category of the message (default: the shared log's name)
        stacklevel: Frames above the caller to report as the call-site

    Returns:
        The dispatched Message, or None if filtered out
    """
    return log(message, Level.ERROR, category, stacklevel=stacklevel + 1)


def warn(
    message: Any, category: str | None = None, *, stacklevel: int = 1
) -> Message | None:
    """Log a WARN message through the shared Log instance.

    Args:
        message: Object to log, or a zero-argument callable producing it
        category: Category of the message (default: the shared log's name)
        stacklevel: Frames above the caller to report as the call-site

    Returns:
        The dispatched Message, or None if filtered out
    """
    return log(message, Level.WARN, category, stacklevel=stacklevel + 1)


def info(
    message: Any, category: str | None = None, *, stacklevel: int = 1
) -> Message | None:
    """Log an INFO message through the shared Log instance.

    Args:
        message: Object to log, or a zero-argument callable producing it
        category: Category of the message (default: the shared log's name)
        stacklevel: Frames above the caller to report as the call-site

    Returns:
        The dispatched Message, or None if filtered out
    """
    return log(message, Level.INFO, category, stacklevel=stacklevel + 1)


def debug(
    message: Any, category: str | None = None, *, stacklevel: int = 1
) -> Message | None:
    """Log a DEBUG message through the shared Log instance.

    Args:
        message: Object to log, or a zero-argument callable producing it
        category: Category of the message (default: the shared log's name)
        stacklevel: Frames above the caller to report as the call-site

    Returns:
        The dispatched Message, or None if filtered out
    """
    return log(message, Level.DEBUG, category, stacklevel=stacklevel + 1)


def verbose(
    message: Any, category: str | None = None, *, stacklevel: int = 1
) -> Message | None:
    """Log a VERBOSE message through the shared Log instance.

    Args:
        message: Object to log, or a zero-argument callable producing it
        category: Category of the message (default: the shared log's name)
        stacklevel: Frames above the caller to report as the call-site

    Returns:
        The dispatched Message, or None if filtered out
    """
    return log(message, Level.VERBOSE, category, stacklevel=stacklevel + 1)


def get_level() -> Level:
    """Return the threshold of the shared Log instance."""
    return shared().level


def set_level(level: Level | int | str) -> None:
    """Set the threshold of the shared Log instance.

    Unrecognised values leave the threshold unchanged.
    """
    instance = shared()
    parsed = Level.parse(level, instance.level)
    if parsed is not None:
        instance.level = parsed


def get_use_emoji() -> bool:
    """Return True if the shared Log instance renders level emoji."""
    return shared().use_emoji


def set_use_emoji(use_emoji: bool) -> None:
    """Enable or disable level emoji on the shared Log instance."""
    shared().use_emoji = use_emoji


def add_handler(handler: LogHandler) -> None:
    """Add a handler to the shared Log instance only."""
    shared().add_handler(handler)


def add_global_handler(handler: LogHandler) -> None:
    """Add a handler receiving messages from every Log instance."""
    get_registry().add_log_handler(handler)
