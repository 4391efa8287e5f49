"""Bridges between tracelog and Python's standard library logging module.

``SystemLogHandler`` and ``SystemTraceHandler`` forward tracelog records to
:mod:`logging` loggers named after a subsystem and the record's category.
``TracelogHandler`` goes the other way: it is a ``logging.Handler`` that
routes standard library records into a :class:`~tracelog.core.logger.Log`.
Records forwarded by ``SystemLogHandler`` carry a marker attribute and are
ignored by ``TracelogHandler``, so both directions can be installed at once.
"""

import logging
import sys
import traceback
from pathlib import Path
from typing import TYPE_CHECKING

from tracelog.core.callsite import CallSite
from tracelog.core.logger import Log
from tracelog.core.models import Level, Message, Signpost

if TYPE_CHECKING:
    from tracelog.core.tracer import Trace

# Standard library level for VERBOSE messages
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

DEFAULT_SUBSYSTEM = "tracelog"

# Attribute set on records forwarded into logging by SystemLogHandler
FORWARDED_ATTR = "tracelog_forwarded"

_TO_STDLIB: dict[Level, int] = {
    Level.VERBOSE: TRACE,
    Level.DEBUG: logging.DEBUG,
    Level.INFO: logging.INFO,
    Level.WARN: logging.WARNING,
    Level.ERROR: logging.ERROR,
}


def to_stdlib_level(level: Level) -> int | None:
    """Map a tracelog Level to a logging level number (None for OFF)."""
    return _TO_STDLIB.get(level)


def from_stdlib_level(levelno: int) -> Level:
    """Map a logging level number to the closest tracelog Level."""
    if levelno >= logging.ERROR:
        return Level.ERROR
    if levelno >= logging.WARNING:
        return Level.WARN
    if levelno >= logging.INFO:
        return Level.INFO
    if levelno >= logging.DEBUG:
        return Level.DEBUG
    return Level.VERBOSE


def default_subsystem() -> str:
    """Derive a subsystem name from the running application.

    Uses the stem of the executed script (``sys.argv[0]``), falling back to
    ``"tracelog"``, and appends ``".log"``.
    """
    argv0 = sys.argv[0] if sys.argv else ""
    stem = Path(argv0).stem if argv0 else ""
    if not stem or stem.startswith("-"):
        stem = DEFAULT_SUBSYSTEM
    return f"{stem}.log"


def _logger_name(subsystem: str, category: str) -> str:
    return f"{subsystem}.{category}" if category else subsystem


class SystemLogHandler:
    """LogHandler forwarding messages to standard library loggers.

    Messages go to the logger ``"<subsystem>.<category>"`` with the level
    mapped onto the logging module's levels (VERBOSE becomes ``TRACE``).
    The raw message text is forwarded; the call-site and category are
    attached to the record as ``tracelog_location`` and
    ``tracelog_category``.

    Example:
        ```python
        import logging

        from tracelog import Log, Level, SystemLogHandler

        logging.basicConfig(level=logging.DEBUG)
        log = Log("Network", level=Level.DEBUG)
        log.add_handler(SystemLogHandler("myapp"))
        ```
    """

    def __init__(self, subsystem: str | None = None) -> None:
        """Initialize the handler.

        Args:
            subsystem: Prefix of the logger names. Derived from the running
                application when omitted.
        """
        self.subsystem = subsystem or default_subsystem()

    def logger_for(self, category: str) -> logging.Logger:
        """Return the logger messages of ``category`` are sent to."""
        return logging.getLogger(_logger_name(self.subsystem, category))

    def handle(self, message: Message) -> None:
        """Forward a message to its category's logger."""
        levelno = to_stdlib_level(message.level)
        if levelno is None:
            return
        self.logger_for(message.category).log(
            levelno,
            message.message,
            extra={
                FORWARDED_ATTR: True,
                "tracelog_location": message.location,
                "tracelog_category": message.category,
            },
        )


class SystemTraceHandler:
    """TraceHandler forwarding signpost descriptions to standard library loggers.

    Signposts go to ``"<subsystem>.<category>"``, or ``"<subsystem>.trace"``
    for signposts without a category.
    """

    def __init__(self, subsystem: str | None = None, level: int = logging.DEBUG) -> None:
        """Initialize the handler.

        Args:
            subsystem: Prefix of the logger names. Derived from the running
                application when omitted.
            level: Logging level used for every signpost.
        """
        self.subsystem = subsystem or default_subsystem()
        self.level = level

    def handle(self, trace: "Trace", signpost: Signpost) -> None:
        """Forward a signpost's description."""
        logger = logging.getLogger(
            _logger_name(self.subsystem, signpost.category or "trace")
        )
        logger.log(
            self.level,
            signpost.description,
            extra={FORWARDED_ATTR: True, "tracelog_signpost": signpost.name},
        )


class TracelogHandler(logging.Handler):
    """Logging handler that routes log records into a tracelog Log.

    The Log's own threshold still applies. The record's logger name becomes
    the message category and its file, function and line the call-site.

    Example:
        ```python
        import logging

        from tracelog import Level, Log, TracelogHandler

        log = Log("App", level=Level.INFO)
        logging.getLogger().addHandler(TracelogHandler(log))
        ```
    """

    def __init__(self, log: Log | None = None, level: int = logging.NOTSET) -> None:
        """Initialize the handler with a target Log.

        Args:
            log: Log receiving the records. Defaults to the shared Log of the
                default registry, resolved per record.
            level: Minimum logging level handled.
        """
        super().__init__(level)
        self._log = log

    @property
    def log(self) -> Log:
        """Log receiving the records."""
        if self._log is not None:
            return self._log
        from tracelog.core.registry import get_registry

        return get_registry().shared_log

    def emit(self, record: logging.LogRecord) -> None:
        """Route a log record into the target Log.

        Args:
            record: The log record to emit.
        """
        # Own diagnostics are skipped so a failing handler cannot recurse
        if getattr(record, FORWARDED_ATTR, False) or record.name == "tracelog":
            return
        try:
            text = record.getMessage()
            if record.exc_info and record.exc_info[0] is not None:
                text += "\n" + "".join(traceback.format_exception(*record.exc_info))
            self.log.log(
                text,
                from_stdlib_level(record.levelno),
                record.name,
                location=CallSite(record.pathname, record.funcName or "", record.lineno),
            )
        except Exception:
            self.handleError(record)
