"""BDD step definitions for exposition conversion features."""

from dataclasses import dataclass, field

import pytest
from pytest_bdd import given, parsers, then, when

from otelpush.core.exceptions import MalformedLineError
from otelpush.core.exposition import convert
from otelpush.core.models import Attribute, Document, DoubleValue, IntValue, Metric


@dataclass
class ExpositionScenarioContext:
    """Shared state between steps in an exposition scenario."""

    lines: list[str] = field(default_factory=list)
    captured_at: int = 0
    document: Document | None = None
    error: MalformedLineError | None = None

    def metric(self, position: int) -> Metric:
        """Return the metric at a 1-based position."""
        assert self.document is not None, "exposition was not converted"
        return self.document.metrics[position - 1]


@pytest.fixture
def ctx() -> ExpositionScenarioContext:
    """Fresh scenario context for each test."""
    return ExpositionScenarioContext()


def _convert(ctx: ExpositionScenarioContext, skip_malformed: bool) -> None:
    text = "\n".join(ctx.lines) + "\n"
    try:
        ctx.document = convert(text, ctx.captured_at, skip_malformed=skip_malformed)
    except MalformedLineError as e:
        ctx.error = e


# === Given ===
@given(parsers.parse("a capture time of {captured_at:d}"))
def step_capture_time(ctx: ExpositionScenarioContext, captured_at: int) -> None:
    ctx.captured_at = captured_at


@given(parsers.parse("the exposition line '{line}'"))
def step_exposition_line(ctx: ExpositionScenarioContext, line: str) -> None:
    ctx.lines.append(line)


# === When ===
@when("the exposition is converted")
def step_convert(ctx: ExpositionScenarioContext) -> None:
    _convert(ctx, skip_malformed=False)


@when("the exposition is converted skipping malformed lines")
def step_convert_skipping(ctx: ExpositionScenarioContext) -> None:
    _convert(ctx, skip_malformed=True)


# === Then ===
@then(parsers.parse("the document contains {count:d} metrics"))
def step_metric_count(ctx: ExpositionScenarioContext, count: int) -> None:
    assert ctx.document is not None
    assert len(ctx.document.metrics) == count


@then(parsers.parse('metric {position:d} is named "{name}"'))
def step_metric_name(ctx: ExpositionScenarioContext, position: int, name: str) -> None:
    assert ctx.metric(position).name == name


@then(parsers.parse("metric {position:d} has integer value {value}"))
def step_integer_value(
    ctx: ExpositionScenarioContext, position: int, value: str
) -> None:
    assert ctx.metric(position).data_points[0].value == IntValue(int(value))


@then(parsers.parse("metric {position:d} has double value {value}"))
def step_double_value(ctx: ExpositionScenarioContext, position: int, value: str) -> None:
    assert ctx.metric(position).data_points[0].value == DoubleValue(float(value))


@then(parsers.parse('metric {position:d} has attributes "{pairs}"'))
def step_attributes(ctx: ExpositionScenarioContext, position: int, pairs: str) -> None:
    expected = tuple(
        Attribute(*pair.split("=", 1)) for pair in pairs.split(",")
    )
    assert ctx.metric(position).data_points[0].attributes == expected


@then(parsers.parse("metric {position:d} has no attributes"))
def step_no_attributes(ctx: ExpositionScenarioContext, position: int) -> None:
    assert ctx.metric(position).data_points[0].attributes == ()


@then("every data point is stamped with the capture time")
def step_stamped(ctx: ExpositionScenarioContext) -> None:
    assert ctx.document is not None
    for metric in ctx.document.metrics:
        for point in metric.data_points:
            assert point.time_unix_nano == ctx.captured_at


@then(parsers.parse("conversion fails with a malformed line error on line {line_number:d}"))
def step_malformed(ctx: ExpositionScenarioContext, line_number: int) -> None:
    assert ctx.document is None
    assert ctx.error is not None
    assert ctx.error.line_number == line_number
