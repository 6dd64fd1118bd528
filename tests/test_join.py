"""Tests for the fan-out/join – children settle out of order on purpose."""

import asyncio

import pytest

from schemarules.engine.field import Field, FieldResult
from schemarules.engine.join import gather_fields
from schemarules.engine.validator import Validator
from schemarules.rules import composition, scalar
from schemarules.schemas.options import ValidatorOptions

settled = []


def _delay(accept, value, field):
    """Settle after ``value * accept`` seconds and multiply the value by ten."""
    seconds = value * accept if scalar.is_number(value) else 0

    async def settle():
        await asyncio.sleep(seconds)
        settled.append(value)
        return FieldResult(value=value * 10)

    field.defer(settle)


def _explode(accept, value, field):
    raise RuntimeError("rule defect")


class Delayed(Validator):
    pass


Delayed.add_rule("delay", validate=_delay)
Delayed.add_rule("type", validate=scalar.validate_type)
Delayed.add_rule("explode", validate=_explode)
Delayed.add_rule("properties", validate=composition.validate_properties)
Delayed.add_rule("additionalProperties")
Delayed.add_rule("items", validate=composition.validate_items)


@pytest.fixture(autouse=True)
def reset_settled():
    settled.clear()


def _children(schema, values):
    options = ValidatorOptions()
    return {
        key: Field(Delayed.rules, value, schema, options=options, path=(key,))
        for key, value in values.items()
    }


def test_items_written_back_by_index():
    report = Delayed.validate([3, 1, 2], {"items": {"delay": 0.02}})

    assert settled == [1, 2, 3]
    assert report.valid
    assert report.value == [30, 10, 20]


def test_properties_written_back_by_name():
    schema = {"properties": {"slow": {"delay": 0.02}, "fast": {"delay": 0.02}}}
    report = Delayed.validate({"slow": 3, "fast": 1}, schema)

    assert settled == [1, 3]
    assert list(report.value.items()) == [("slow", 30), ("fast", 10)]


def test_first_failure_wins_and_pending_children_are_discarded():
    async def scenario():
        outcome = await gather_fields(
            _children({"type": "integer", "delay": 0.01}, {"slow": 5, "bad": "x", "worse": "y"})
        )
        await asyncio.sleep(0.1)
        return outcome

    outcome = asyncio.run(scenario())

    assert not outcome.ok
    assert outcome.failed_key == "bad"
    assert [issue.path for issue in outcome.failure.issues] == ["bad"]
    # The slow child never settled: it was cancelled after the failure.
    assert 5 not in settled


def test_failed_item_reports_single_child_issue():
    report = Delayed.validate([1, "a", 2, "b"], {"items": {"type": "integer"}})

    assert not report.valid
    assert [issue.path for issue in report.issues] == ["1"]
    assert report.value == [1, "a", 2, "b"]


def test_empty_join_succeeds():
    outcome = asyncio.run(gather_fields({}))
    assert outcome.ok
    assert outcome.values == {}


def test_empty_collections_validate_to_empty_results():
    assert Delayed.validate([], {"items": {"type": "integer"}}).value == []
    assert Delayed.validate({}, {"properties": {"a": {"type": "integer"}}}).value == {}


def test_child_exception_propagates_through_join():
    with pytest.raises(RuntimeError, match="rule defect"):
        Delayed.validate([1, 2], {"items": {"explode": True}})
