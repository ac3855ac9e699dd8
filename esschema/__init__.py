"""
Check that the schema of an Elasticsearch index is compatible with the schema an application expects.

Build (or parse) the expected IndexSchema, then either validate it against a live index with
esschema.elastic.validate_index, or against a schema you already have with SchemaValidator.validate.
"""

from esschema.errors import SchemaValidationError
from esschema.models import DataType, DynamicType, IndexSchema, IndexType, PropertyMapping, TypeMapping
from esschema.validator import SchemaValidator, validate_schema

__all__ = [
    "DataType",
    "DynamicType",
    "IndexSchema",
    "IndexType",
    "PropertyMapping",
    "SchemaValidationError",
    "SchemaValidator",
    "TypeMapping",
    "validate_schema",
]
