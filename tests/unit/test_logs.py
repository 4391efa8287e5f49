"""Tests for shared-instance log and trace helper functions."""

import pytest

from tracelog.adapters.capture import InMemoryLogHandler, InMemoryTraceHandler
from tracelog.core import logs, traces
from tracelog.core.logger import Log
from tracelog.core.models import Level
from tracelog.core.registry import Registry


@pytest.fixture
def shared_capture(default_registry: Registry) -> InMemoryLogHandler:
    """Capture handler on the shared Log, which is lowered to VERBOSE."""
    handler = InMemoryLogHandler()
    logs.set_level(Level.VERBOSE)
    logs.add_handler(handler)
    return handler


class TestLogHelper:
    """Tests for logs.log()."""

    @pytest.mark.core
    def test_log_uses_shared_instance(self, shared_capture: InMemoryLogHandler) -> None:
        """log() dispatches through the shared Log."""
        logs.log("Server started", Level.INFO)

        (message,) = shared_capture.messages
        assert message.level is Level.INFO
        assert message.message == "Server started"
        assert message.category == "Log"

    @pytest.mark.core
    def test_log_accepts_category(self, shared_capture: InMemoryLogHandler) -> None:
        """An explicit category overrides the shared log's name."""
        logs.log("Query slow", Level.WARN, "Database")

        assert shared_capture.messages[0].category == "Database"

    @pytest.mark.core
    def test_log_reports_caller_location(
        self, shared_capture: InMemoryLogHandler
    ) -> None:
        """The call-site is the code calling the helper."""
        logs.log("here", Level.INFO)
        logs.info("there")

        for message in shared_capture.messages:
            assert "test_log_reports_caller_location" in message.location

    @pytest.mark.core
    def test_nothing_is_logged_by_default(self, default_registry: Registry) -> None:
        """The shared Log starts with an OFF threshold."""
        handler = InMemoryLogHandler()
        logs.add_handler(handler)

        logs.error("ignored")

        assert handler.messages == []


class TestLevelHelpers:
    """Tests for the level-specific helpers."""

    @pytest.mark.core
    @pytest.mark.parametrize(
        ("helper", "level"),
        [
            (logs.verbose, Level.VERBOSE),
            (logs.debug, Level.DEBUG),
            (logs.info, Level.INFO),
            (logs.warn, Level.WARN),
            (logs.error, Level.ERROR),
        ],
    )
    def test_helper_sets_level(
        self, shared_capture: InMemoryLogHandler, helper, level: Level
    ) -> None:
        """Each helper logs at its own level."""
        helper("message")

        assert shared_capture.messages[0].level is level

    @pytest.mark.core
    def test_helpers_accept_category(self, shared_capture: InMemoryLogHandler) -> None:
        """Helpers accept an optional category."""
        logs.error("Timeout", "Network")

        assert shared_capture.messages[0].category == "Network"


class TestSharedConfiguration:
    """Tests for level, emoji and handler helpers."""

    @pytest.mark.core
    def test_set_level_accepts_names(self, default_registry: Registry) -> None:
        """set_level parses level names."""
        logs.set_level("warning")

        assert logs.get_level() is Level.WARN

    @pytest.mark.core
    def test_set_level_ignores_unknown_values(self, default_registry: Registry) -> None:
        """Unknown levels leave the threshold unchanged."""
        logs.set_level(Level.INFO)
        logs.set_level("shouting")

        assert logs.get_level() is Level.INFO

    @pytest.mark.core
    def test_set_use_emoji(self, shared_capture: InMemoryLogHandler) -> None:
        """The emoji flag applies to the shared Log."""
        logs.set_use_emoji(True)
        logs.warn("careful")

        assert logs.get_use_emoji() is True
        assert shared_capture.messages[0].description.startswith("⚠️ ")

    @pytest.mark.core
    def test_add_handler_is_scoped_to_shared_log(
        self, default_registry: Registry
    ) -> None:
        """add_handler only affects the shared instance."""
        handler = InMemoryLogHandler()
        logs.add_handler(handler)

        Log("Other", level=Level.INFO).info("elsewhere")

        assert handler.messages == []

    @pytest.mark.core
    def test_add_global_handler_sees_every_log(
        self, default_registry: Registry
    ) -> None:
        """add_global_handler receives messages from all instances."""
        handler = InMemoryLogHandler()
        logs.add_global_handler(handler)
        logs.set_level(Level.INFO)

        logs.info("shared")
        Log("Other", level=Level.INFO).info("elsewhere")

        assert [m.category for m in handler.messages] == ["Log", "Other"]


class TestTraceHelpers:
    """Tests for the shared Trace helpers."""

    @pytest.mark.core
    def test_begin_end_use_shared_trace(self, default_registry: Registry) -> None:
        """begin/end time a span on the shared Trace."""
        handler = InMemoryTraceHandler()
        traces.add_global_handler(handler)

        traces.begin("boot", at=1.0)
        signpost = traces.end("boot", at=3.0)

        assert handler.signposts == [signpost]
        assert signpost is not None
        assert signpost.duration == 2.0
        assert signpost.category == ""
        assert signpost.description == "boot: 2.00 s\nAverage: 2.00 s"

    @pytest.mark.core
    def test_event_and_reset(self, default_registry: Registry) -> None:
        """event reports instantly and reset clears shared averages."""
        handler = InMemoryTraceHandler()
        traces.add_global_handler(handler)
        traces.begin("boot", at=0.0)
        traces.end("boot", at=1.0)

        traces.event("tick", at=2.0)
        traces.reset()

        assert handler.signposts[-1].name == "tick"
        assert traces.shared().average("boot") is None

    @pytest.mark.core
    def test_span_helper(self, default_registry: Registry) -> None:
        """span() times a block on the shared Trace."""
        handler = InMemoryTraceHandler()
        traces.add_global_handler(handler)

        with traces.span("work"):
            pass

        assert [s.name for s in handler.signposts] == ["work"]


class TestPackageExports:
    """Tests for package-level exports."""

    @pytest.mark.core
    def test_level_helpers_importable_from_package(self) -> None:
        """Log helpers are importable from the tracelog package."""
        from tracelog import debug, error, info, log, verbose, warn

        assert all(callable(fn) for fn in [log, verbose, debug, info, warn, error])

    @pytest.mark.core
    def test_trace_helpers_importable_from_package(self) -> None:
        """Trace helpers are importable from the tracelog package."""
        from tracelog import begin, end, event, span

        assert all(callable(fn) for fn in [begin, end, event, span])
