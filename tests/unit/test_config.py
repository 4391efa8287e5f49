"""Tests for TracelogConfig."""

import pytest

from tracelog.core.config import TracelogConfig
from tracelog.core.models import Level


class TestTracelogConfig:
    """Tests for TracelogConfig defaults and from_env()."""

    @pytest.mark.core
    def test_defaults(self) -> None:
        """Defaults are silent, emoji-free and install default handlers."""
        config = TracelogConfig()
        assert config.level is Level.OFF
        assert config.use_emoji is False
        assert config.subsystem is None
        assert config.default_handlers is True

    @pytest.mark.core
    def test_from_empty_env(self) -> None:
        """An empty environment yields the defaults."""
        assert TracelogConfig.from_env({}) == TracelogConfig()

    @pytest.mark.core
    def test_from_env_reads_every_variable(self) -> None:
        """Every TRACELOG_* variable is honoured."""
        config = TracelogConfig.from_env(
            {
                "TRACELOG_LEVEL": "Debug",
                "TRACELOG_EMOJI": "yes",
                "TRACELOG_SUBSYSTEM": "com.example.app",
                "TRACELOG_DEFAULT_HANDLERS": "off",
            }
        )
        assert config == TracelogConfig(
            level=Level.DEBUG,
            use_emoji=True,
            subsystem="com.example.app",
            default_handlers=False,
        )

    @pytest.mark.core
    @pytest.mark.parametrize(
        "env",
        [
            {"TRACELOG_LEVEL": "chatty"},
            {"TRACELOG_EMOJI": "maybe"},
            {"TRACELOG_DEFAULT_HANDLERS": "sometimes"},
            {"TRACELOG_SUBSYSTEM": ""},
        ],
    )
    def test_invalid_values_fall_back_to_defaults(self, env: dict[str, str]) -> None:
        """Unparseable values are replaced by defaults instead of raising."""
        assert TracelogConfig.from_env(env) == TracelogConfig()

    @pytest.mark.core
    def test_reads_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """from_env() without arguments reads os.environ."""
        monkeypatch.setenv("TRACELOG_LEVEL", "error")
        assert TracelogConfig.from_env().level is Level.ERROR
