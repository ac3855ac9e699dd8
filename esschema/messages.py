"""
Human readable messages for schema validation findings.
"""

from enum import Enum
from typing import Any, Iterable


def format_value(value: Any) -> str:
    """Render a mapping attribute value the way it would appear in the elastic mapping"""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (list, tuple)):
        return format_list(value)
    return str(value)


def format_list(values: Iterable[Any]) -> str:
    return "[" + ", ".join(format_value(v) for v in values) + "]"


def mapping_missing() -> str:
    return "Missing type mapping"


def property_missing() -> str:
    return "Missing property mapping"


def field_missing() -> str:
    return "Missing field mapping"


def invalid_attribute_value(attribute: str, expected: Any, actual: Any) -> str:
    return (
        f"Invalid value for attribute '{attribute}'. "
        f"Expected '{format_value(expected)}', actual is '{format_value(actual)}'"
    )


def invalid_output_format(attribute: str, expected: str | None, actual: str | None) -> str:
    return (
        f"The output format (the first format in the '{attribute}' attribute) is invalid. "
        f"Expected '{format_value(expected)}', actual is '{format_value(actual)}'"
    )


def invalid_input_format(
    attribute: str, expected: list[str], actual: list[str], missing: list[str], unexpected: list[str]
) -> str:
    return (
        f"Invalid formats for attribute '{attribute}'. "
        "Every required format must be in the list, though it's not required to provide them in the same order, "
        "and no other format may be present. "
        f"Expected '{format_list(expected)}', actual is '{format_list(actual)}', "
        f"missing elements are '{format_list(missing)}', unexpected elements are '{format_list(unexpected)}'"
    )


def error_intro(
    index_name: str | None,
    mapping_name: str | None = None,
    path: str | None = None,
    field_name: str | None = None,
) -> str:
    intro = f"Validation failed for index '{index_name}'"
    if mapping_name:
        intro += f", mapping '{mapping_name}'"
    if path:
        intro += f", property '{path}'"
    if field_name:
        intro += f", field '{field_name}'"
    return intro + ":"
