"""BDD step definitions for recorder construction features."""

from dataclasses import dataclass
from typing import Any

import pytest
from pytest_bdd import given, parsers, then, when

from telemetria.adapters.recorders import NoRecorder, new_recorder
from telemetria.core import errors
from telemetria.core.errors import TelemetryError
from telemetria.core.models import Metric


@dataclass
class RecorderScenarioContext:
    """Shared state between steps in a recorder scenario."""

    recorder: Any = None
    derived: Any = None
    error: TelemetryError | None = None


@pytest.fixture
def ctx() -> RecorderScenarioContext:
    """Fresh scenario context for each test."""
    return RecorderScenarioContext()


@given(parsers.parse('a recorder created for "{address}"'))
@when(parsers.parse('a recorder is created for "{address}"'))
def step_create_recorder(ctx: RecorderScenarioContext, address: str) -> None:
    try:
        ctx.recorder = new_recorder(address)
    except TelemetryError as e:
        ctx.error = e


@given("a disabled recorder")
def step_disabled_recorder(ctx: RecorderScenarioContext) -> None:
    ctx.recorder = NoRecorder()


@when(parsers.parse('the precision is changed to "{precision}"'))
def step_change_precision(ctx: RecorderScenarioContext, precision: str) -> None:
    ctx.derived = ctx.recorder.with_precision(precision)


@when("an empty metric is written")
def step_write_empty_metric(ctx: RecorderScenarioContext) -> None:
    try:
        ctx.recorder.write_one(Metric(name="", fields={}))
    except TelemetryError as e:
        ctx.error = e


@then(parsers.parse('the recorder uses the "{transport}" transport'))
def step_transport(ctx: RecorderScenarioContext, transport: str) -> None:
    assert ctx.error is None
    assert ctx.recorder.transport == transport


@then(parsers.re(r'the recorder writes to database "(?P<database>.*)"'))
def step_database(ctx: RecorderScenarioContext, database: str) -> None:
    assert ctx.recorder.database == database


@then(parsers.parse('the recorder precision is "{precision}"'))
def step_precision(ctx: RecorderScenarioContext, precision: str) -> None:
    assert ctx.recorder.precision == precision


@then(parsers.parse('the new recorder precision is "{precision}"'))
def step_derived_precision(ctx: RecorderScenarioContext, precision: str) -> None:
    assert ctx.derived is not ctx.recorder
    assert ctx.derived.precision == precision


@then(parsers.parse("creating the recorder fails with {error_name}"))
def step_fails_with(ctx: RecorderScenarioContext, error_name: str) -> None:
    assert ctx.recorder is None
    assert type(ctx.error) is getattr(errors, error_name)


@then("no error is raised")
def step_no_error(ctx: RecorderScenarioContext) -> None:
    assert ctx.error is None
