"""
Comparison of single mapping attributes.

Elasticsearch does not report attributes that were left at their default value, so an absent value
on either side is replaced by the default before comparing. Messages always show the defaulted expected
value, but the raw actual value: showing a default that elastic doesn't actually report would only confuse.
"""

from typing import Any, Sequence

from esschema import messages
from esschema.errors import ValidationErrorCollector


def _equals(expected: Any, actual: Any) -> bool:
    # True == 1 in python, but not in a json mapping
    return expected == actual and isinstance(expected, bool) == isinstance(actual, bool)


def validate_equal_with_default(
    collector: ValidationErrorCollector, attribute: str, expected: Any, actual: Any, default: Any = None
) -> None:
    """Validate that two values are equal, using the given default for a missing value on either side"""
    defaulted_expected = default if expected is None else expected
    defaulted_actual = default if actual is None else actual
    if not _equals(defaulted_expected, defaulted_actual):
        collector.add_error(messages.invalid_attribute_value(attribute, defaulted_expected, actual))


def validate_number_with_default(
    collector: ValidationErrorCollector,
    attribute: str,
    expected: float | None,
    actual: float | None,
    delta: float,
    default: float | None = None,
) -> None:
    """Like validate_equal_with_default, but floating point values are equal if they differ no more than delta"""
    defaulted_expected = default if expected is None else expected
    defaulted_actual = default if actual is None else actual
    if defaulted_expected is None or defaulted_actual is None:
        if defaulted_expected is None and defaulted_actual is None:
            return
        collector.add_error(messages.invalid_attribute_value(attribute, defaulted_expected, actual))
    elif abs(defaulted_expected - defaulted_actual) > delta:
        collector.add_error(messages.invalid_attribute_value(attribute, defaulted_expected, actual))


def validate_format_with_default(
    collector: ValidationErrorCollector,
    attribute: str,
    expected: Sequence[str] | None,
    actual: Sequence[str] | None,
    default: Sequence[str],
) -> None:
    """
    Validate an elastic format list:
    - The first format is used for output, so it needs to be the same on both sides
    - The other formats are only used for parsing, so their order does not matter,
      but every expected format must be present and no other format is allowed
    These checks are independent, so both can report an error.
    """
    defaulted_expected = list(default if expected is None else expected)
    defaulted_actual = list(default if actual is None else actual)
    if not defaulted_expected:
        return

    expected_output_format = defaulted_expected[0]
    actual_output_format = defaulted_actual[0] if defaulted_actual else None
    if expected_output_format != actual_output_format:
        collector.add_error(messages.invalid_output_format(attribute, expected_output_format, actual_output_format))

    missing = [f for f in defaulted_expected if f not in defaulted_actual]
    unexpected = [f for f in defaulted_actual if f not in defaulted_expected]
    if missing or unexpected:
        collector.add_error(
            messages.invalid_input_format(attribute, defaulted_expected, defaulted_actual, missing, unexpected)
        )
