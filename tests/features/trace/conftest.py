"""BDD step definitions for trace span features."""

from dataclasses import dataclass, field

import pytest
from pytest_bdd import given, parsers, then, when

from tracelog.adapters.capture import InMemoryTraceHandler
from tracelog.core.registry import Registry
from tracelog.core.tracer import Trace


@dataclass
class TraceScenarioContext:
    """Shared state between steps in a trace scenario."""

    registry: Registry = field(default_factory=Registry)
    capture: InMemoryTraceHandler = field(default_factory=InMemoryTraceHandler)
    trace: Trace | None = None

    @property
    def active_trace(self) -> Trace:
        assert self.trace is not None, "no trace configured"
        return self.trace


@pytest.fixture
def ctx() -> TraceScenarioContext:
    """Fresh scenario context for each test."""
    return TraceScenarioContext()


# === Background Steps ===
@given(parsers.parse('a trace named "{name}" with a capturing handler'))
def step_trace(ctx: TraceScenarioContext, name: str) -> None:
    ctx.registry.add_trace_handler(ctx.capture)
    ctx.trace = Trace(name, registry=ctx.registry)


# === Actions ===
@when(parsers.parse('"{name}" begins at {at:g}'))
def step_begin(ctx: TraceScenarioContext, name: str, at: float) -> None:
    ctx.active_trace.begin(name, at=at)


@when(parsers.parse('"{name}" ends at {at:g}'))
def step_end(ctx: TraceScenarioContext, name: str, at: float) -> None:
    ctx.active_trace.end(name, at=at)


@when(parsers.parse('event "{name}" occurs at {at:g}'))
def step_event(ctx: TraceScenarioContext, name: str, at: float) -> None:
    ctx.active_trace.event(name, at=at)


@when("the trace averages are reset")
def step_reset(ctx: TraceScenarioContext) -> None:
    ctx.active_trace.reset()


# === Outcomes ===
@then(parsers.parse("{n:d} signposts should be emitted"))
def step_count(ctx: TraceScenarioContext, n: int) -> None:
    assert len(ctx.capture.signposts) == n


@then("the signposts should be:")
def step_table(ctx: TraceScenarioContext, datatable: list[list[str]]) -> None:
    rows = datatable[1:]
    signposts = ctx.capture.signposts
    assert len(signposts) == len(rows)
    for (name, duration, average), signpost in zip(rows, signposts):
        assert signpost.name == name
        assert signpost.duration == float(duration)
        if average == "-":
            assert signpost.average_duration is None
        else:
            assert signpost.average_duration == pytest.approx(float(average))


@then(
    parsers.parse(
        "the last signpost should have duration {duration:g} and average {average:g}"
    )
)
def step_last_duration_average(
    ctx: TraceScenarioContext, duration: float, average: float
) -> None:
    signpost = ctx.capture.signposts[-1]
    assert signpost.duration == duration
    assert signpost.average_duration == pytest.approx(average)


@then("the last signpost should have no average")
def step_last_no_average(ctx: TraceScenarioContext) -> None:
    assert ctx.capture.signposts[-1].average_duration is None


@then("the last signpost description should be:")
def step_last_description(ctx: TraceScenarioContext, docstring: str) -> None:
    assert ctx.capture.signposts[-1].description == docstring
