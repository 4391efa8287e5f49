"""Process-wide configuration for the shared facilities."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from tracelog.core.models import Level

ENV_LEVEL = "TRACELOG_LEVEL"
ENV_EMOJI = "TRACELOG_EMOJI"
ENV_SUBSYSTEM = "TRACELOG_SUBSYSTEM"
ENV_DEFAULT_HANDLERS = "TRACELOG_DEFAULT_HANDLERS"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(raw: str | None, default: bool) -> bool:
    """Parse a boolean flag, returning ``default`` if missing or invalid."""
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


@dataclass
class TracelogConfig:
    """Configuration applied to a Registry and its shared facilities.

    Attributes:
        level: Threshold of the shared Log instance.
        use_emoji: Render level emoji in the shared Log instance.
        subsystem: Subsystem used by the default system-log handler.
            None derives it from the running application.
        default_handlers: Install the default process-wide handlers
            (system log for messages, console for signposts).
    """

    level: Level = Level.OFF
    use_emoji: bool = False
    subsystem: str | None = None
    default_handlers: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "TracelogConfig":
        """Build a configuration from ``TRACELOG_*`` environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``).

        Returns:
            TracelogConfig with unparseable values replaced by defaults.
        """
        env = os.environ if environ is None else environ
        level = Level.parse(env.get(ENV_LEVEL), Level.OFF)
        return cls(
            level=level if level is not None else Level.OFF,
            use_emoji=_parse_bool(env.get(ENV_EMOJI), False),
            subsystem=env.get(ENV_SUBSYSTEM) or None,
            default_handlers=_parse_bool(env.get(ENV_DEFAULT_HANDLERS), True),
        )
