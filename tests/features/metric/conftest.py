"""BDD step definitions for metric record features."""

from dataclasses import dataclass
from datetime import UTC, datetime

import pytest
from pytest_bdd import given, parsers, then, when

from pipemetric.core.metric import Metric


@dataclass
class MetricScenarioContext:
    """Shared state between steps in a metric scenario."""

    metric: Metric | None = None
    copy: Metric | None = None
    remembered_hash: int | None = None


@pytest.fixture
def ctx() -> MetricScenarioContext:
    """Fresh scenario context for each test."""
    return MetricScenarioContext()


def _now() -> datetime:
    return datetime(2024, 1, 1, tzinfo=UTC)


# === Given ===
@given(parsers.parse('a metric named "{name}"'))
def step_metric(ctx: MetricScenarioContext, name: str) -> None:
    ctx.metric = Metric(name, None, None, _now())


@given(parsers.parse('a metric built from a list field "{key}"'))
def step_metric_with_list_field(ctx: MetricScenarioContext, key: str) -> None:
    ctx.metric = Metric("cpu", None, {key: [1, 2], "ok": 1}, _now())


@given("the identity hash is remembered")
def step_remember_hash(ctx: MetricScenarioContext) -> None:
    ctx.remembered_hash = ctx.metric.hash_id()


@given("a copy of the metric")
def step_copy(ctx: MetricScenarioContext) -> None:
    ctx.copy = ctx.metric.copy()


# === When ===
@given(parsers.parse('the tag "{key}" is set to "{value}"'))
@when(parsers.parse('the tag "{key}" is set to "{value}"'))
def step_set_tag(ctx: MetricScenarioContext, key: str, value: str) -> None:
    ctx.metric.add_tag(key, value)


@when(parsers.parse('the copy\'s tag "{key}" is set to "{value}"'))
def step_set_copy_tag(ctx: MetricScenarioContext, key: str, value: str) -> None:
    ctx.copy.add_tag(key, value)


@when(parsers.parse('the field "{key}" is set to text "{value}"'))
def step_set_field_text(ctx: MetricScenarioContext, key: str, value: str) -> None:
    ctx.metric.add_field(key, value)


@when("the metric is marked aggregate with false")
def step_set_aggregate_false(ctx: MetricScenarioContext) -> None:
    ctx.metric.set_aggregate(False)


# === Then ===
@then(parsers.parse('the tag keys are "{keys}"'))
def step_tag_keys(ctx: MetricScenarioContext, keys: str) -> None:
    assert [t.key for t in ctx.metric.tag_list()] == keys.split(",")


@then(parsers.parse('the tag "{key}" has value "{value}"'))
def step_tag_value(ctx: MetricScenarioContext, key: str, value: str) -> None:
    assert ctx.metric.get_tag(key) == (value, True)


@then(parsers.parse('the field "{key}" has value {value:f}'))
def step_field_value(ctx: MetricScenarioContext, key: str, value: float) -> None:
    assert ctx.metric.get_field(key) == (pytest.approx(value), True)


@then(parsers.parse('the field "{key}" is present without a value'))
def step_field_no_value(ctx: MetricScenarioContext, key: str) -> None:
    assert ctx.metric.get_field(key) == (None, True)


@then(parsers.parse('the metric has no field "{key}"'))
def step_no_field(ctx: MetricScenarioContext, key: str) -> None:
    assert not ctx.metric.has_field(key)
    assert ctx.metric.has_field("ok")


@then("the identity hash is unchanged")
def step_hash_unchanged(ctx: MetricScenarioContext) -> None:
    assert ctx.metric.hash_id() == ctx.remembered_hash


@then("the identity hash has changed")
def step_hash_changed(ctx: MetricScenarioContext) -> None:
    assert ctx.metric.hash_id() != ctx.remembered_hash


@then("the metric is aggregate")
def step_is_aggregate(ctx: MetricScenarioContext) -> None:
    assert ctx.metric.is_aggregate() is True
