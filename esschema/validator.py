"""
Validation of an Elasticsearch index schema against the schema we expect.

Important: only the expected side is walked. Mappings, properties, fields and attributes that
only exist in the actual schema are ignored, so users can set elastic options we don't know about
on their indices without breaking validation.
"""

import logging
from typing import Callable

from esschema import messages
from esschema.comparators import (
    validate_equal_with_default,
    validate_format_with_default,
    validate_number_with_default,
)
from esschema.config import FailureMode, get_settings
from esschema.errors import SchemaValidationError, ValidationErrorCollector, format_report
from esschema.models import (
    DataType,
    DynamicType,
    IndexSchema,
    IndexType,
    NullValue,
    PropertyMapping,
    TypeMapping,
)

logger = logging.getLogger("esschema.validator")

DEFAULT_DOUBLE_DELTA = 0.001
DEFAULT_FLOAT_DELTA = 0.001
DEFAULT_BOOST = 1.0
DEFAULT_DATE_FORMAT = ["strict_date_optional_time", "epoch_millis"]


def _is_number(value: NullValue) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _floating_null_value_validator(delta: float):
    def validate(
        collector: ValidationErrorCollector, attribute: str, expected: NullValue, actual: NullValue
    ) -> None:
        if _is_number(expected) and _is_number(actual):
            validate_number_with_default(collector, attribute, expected, actual, delta)  # type: ignore[arg-type]
        else:
            validate_equal_with_default(collector, attribute, expected, actual)

    return validate


NullValueValidator = Callable[[ValidationErrorCollector, str, NullValue, NullValue], None]

# Every data type needs to choose how its null_value is compared (plain equality doesn't work for floats)
NULL_VALUE_VALIDATORS: dict[DataType, NullValueValidator] = {
    DataType.DOUBLE: _floating_null_value_validator(DEFAULT_DOUBLE_DELTA),
    DataType.FLOAT: _floating_null_value_validator(DEFAULT_FLOAT_DELTA),
    DataType.INTEGER: validate_equal_with_default,
    DataType.LONG: validate_equal_with_default,
    DataType.DATE: validate_equal_with_default,
    DataType.BOOLEAN: validate_equal_with_default,
    DataType.STRING: validate_equal_with_default,
    DataType.OBJECT: validate_equal_with_default,
    DataType.GEO_POINT: validate_equal_with_default,
}


class SchemaValidator:
    """
    Compares an expected schema with the actual schema of an index.
    The validator itself is stateless; every call to validate uses its own collector.
    """

    def validate(self, expected: IndexSchema, actual: IndexSchema) -> None:
        """
        Validate the actual schema against the expected schema.

        :raises SchemaValidationError: listing every finding, grouped by location
        """
        logger.debug(f"Validating schema of index {expected.name!r}")
        collector = ValidationErrorCollector()
        with collector.index(expected.name):
            self._validate_index(collector, expected, actual)

        findings = collector.drain()
        if not findings:
            logger.debug(f"Schema of index {expected.name!r} is valid")
            return
        raise SchemaValidationError(format_report(findings), findings)

    def _validate_index(self, collector: ValidationErrorCollector, expected: IndexSchema, actual: IndexSchema) -> None:
        for mapping_name, expected_mapping in expected.mappings.items():
            actual_mapping = actual.mappings.get(mapping_name)
            with collector.mapping(mapping_name):
                if actual_mapping is None:
                    collector.add_error(messages.mapping_missing())
                    continue
                self._validate_type_mapping(collector, expected_mapping, actual_mapping)

    def _validate_type_mapping(
        self, collector: ValidationErrorCollector, expected: TypeMapping, actual: TypeMapping
    ) -> None:
        if expected.dynamic is not None:  # If not provided, we don't care
            validate_equal_with_default(collector, "dynamic", expected.dynamic, actual.dynamic, DynamicType.TRUE)
        self._validate_properties(collector, expected, actual)

    def _validate_properties(
        self, collector: ValidationErrorCollector, expected: TypeMapping, actual: TypeMapping
    ) -> None:
        if expected.properties is None:
            return
        actual_properties = actual.properties or {}
        for name, expected_property in expected.properties.items():
            actual_property = actual_properties.get(name)
            with collector.property(name):
                if actual_property is None:
                    collector.add_error(messages.property_missing())
                    continue
                self._validate_property_mapping(collector, expected_property, actual_property)

    def _validate_property_mapping(
        self, collector: ValidationErrorCollector, expected: PropertyMapping, actual: PropertyMapping
    ) -> None:
        validate_equal_with_default(collector, "type", expected.type, actual.type, DataType.OBJECT)

        format_default = DEFAULT_DATE_FORMAT if expected.type == DataType.DATE else []
        validate_format_with_default(collector, "format", expected.format, actual.format, format_default)

        validate_number_with_default(collector, "boost", expected.boost, actual.boost, DEFAULT_FLOAT_DELTA, DEFAULT_BOOST)

        if expected.index != IndexType.NO:  # If we don't need an index, we don't care
            # The default depends on the data type
            index_default = IndexType.ANALYZED if expected.type == DataType.STRING else IndexType.NOT_ANALYZED
            validate_equal_with_default(collector, "index", expected.index, actual.index, index_default)

        if expected.doc_values is True:  # If we don't need doc_values, we don't care
            # The elastic docs say doc_values defaults to true on types supporting it, but it reports false
            validate_equal_with_default(collector, "doc_values", expected.doc_values, actual.doc_values, False)

        if expected.store is True:  # If we don't need storage, we don't care
            validate_equal_with_default(collector, "store", expected.store, actual.store, False)

        # Types we don't know are compared like objects: plain equality
        null_value_type = expected.type if isinstance(expected.type, DataType) else DataType.OBJECT
        null_value_validator = NULL_VALUE_VALIDATORS[null_value_type]
        null_value_validator(collector, "null_value", expected.null_value, actual.null_value)

        validate_equal_with_default(collector, "analyzer", expected.analyzer, actual.analyzer)

        self._validate_type_mapping(collector, expected, actual)

        self._validate_fields(collector, expected, actual)

    def _validate_fields(
        self, collector: ValidationErrorCollector, expected: PropertyMapping, actual: PropertyMapping
    ) -> None:
        if expected.fields is None:
            return
        actual_fields = actual.fields or {}
        for name, expected_field in expected.fields.items():
            actual_field = actual_fields.get(name)
            with collector.field(name):
                if actual_field is None:
                    collector.add_error(messages.field_missing())
                    continue
                # Fields have the same attributes as properties
                self._validate_property_mapping(collector, expected_field, actual_field)


def validate_schema(
    expected: IndexSchema,
    actual: IndexSchema,
    on_failure: FailureMode | None = None,
    validator: SchemaValidator | None = None,
) -> bool:
    """
    Validate the actual schema, and deal with a failure according to on_failure
    (by default the on_failure setting): raise the error, or log it as a warning.

    :return: True if the schema is valid, False if it is invalid (and on_failure is log_warning)
    """
    if on_failure is None:
        on_failure = get_settings().on_failure
    if validator is None:
        validator = SchemaValidator()
    try:
        validator.validate(expected, actual)
    except SchemaValidationError as e:
        if on_failure == FailureMode.raise_error:
            raise
        logger.warning(f"Index {expected.name!r} does not match the expected schema:\n{e.report}")
        return False
    logger.info(f"Index {expected.name!r} matches the expected schema")
    return True
