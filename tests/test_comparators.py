import pytest

from esschema.comparators import (
    validate_equal_with_default,
    validate_format_with_default,
    validate_number_with_default,
)
from esschema.errors import ValidationErrorCollector


@pytest.fixture()
def collector():
    return ValidationErrorCollector()


def messages(collector: ValidationErrorCollector) -> list[str]:
    return [m for context_messages in collector.drain().values() for m in context_messages]


def test_equal_with_default(collector):
    validate_equal_with_default(collector, "x", None, "a", "a")
    validate_equal_with_default(collector, "x", "a", None, "a")
    validate_equal_with_default(collector, "x", None, None)
    assert messages(collector) == []

    # expected value is shown defaulted, actual value as elastic reports it
    validate_equal_with_default(collector, "x", None, "b", "a")
    validate_equal_with_default(collector, "x", "b", None, "a")
    assert messages(collector) == [
        "Invalid value for attribute 'x'. Expected 'a', actual is 'b'",
        "Invalid value for attribute 'x'. Expected 'b', actual is 'null'",
    ]


def test_equal_booleans_are_not_numbers(collector):
    validate_equal_with_default(collector, "x", True, 1)
    validate_equal_with_default(collector, "x", 0, False)
    validate_equal_with_default(collector, "x", 1, 1.0)
    assert len(messages(collector)) == 2


def test_number_with_default(collector):
    validate_number_with_default(collector, "x", None, None, 0.001)
    validate_number_with_default(collector, "x", None, 1.0005, 0.001, 1.0)
    validate_number_with_default(collector, "x", 2.0, 2.001, 0.01)
    assert messages(collector) == []

    validate_number_with_default(collector, "x", None, 1.0, 0.001)
    validate_number_with_default(collector, "x", 1.0, None, 0.001)
    validate_number_with_default(collector, "x", 2.0, 2.1, 0.01)
    assert messages(collector) == [
        "Invalid value for attribute 'x'. Expected 'null', actual is '1.0'",
        "Invalid value for attribute 'x'. Expected '1.0', actual is 'null'",
        "Invalid value for attribute 'x'. Expected '2.0', actual is '2.1'",
    ]


def test_format_defaults(collector):
    default = ["strict_date_optional_time", "epoch_millis"]
    validate_format_with_default(collector, "format", None, default, default)
    validate_format_with_default(collector, "format", list(reversed(default)), ["epoch_millis"] + default[:1], default)
    # nothing expected: anything goes
    validate_format_with_default(collector, "format", None, ["yyyy"], [])
    assert messages(collector) == []


def test_format_both_checks(collector):
    validate_format_with_default(collector, "format", ["A", "B"], ["C"], [])
    assert messages(collector) == [
        "The output format (the first format in the 'format' attribute) is invalid. Expected 'A', actual is 'C'",
        "Invalid formats for attribute 'format'. Every required format must be in the list, though it's not required "
        "to provide them in the same order, and no other format may be present. Expected '[A, B]', actual is '[C]', "
        "missing elements are '[A, B]', unexpected elements are '[C]'",
    ]


def test_format_empty_actual(collector):
    validate_format_with_default(collector, "format", ["A"], None, [])
    output, input = messages(collector)
    assert output.endswith("Expected 'A', actual is 'null'")
    assert "missing elements are '[A]', unexpected elements are '[]'" in input
