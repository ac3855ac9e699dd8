import copy
from typing import Any

import pytest

from esschema.config import get_settings
from esschema.errors import SchemaValidationError
from esschema.models import IndexSchema
from esschema.validator import SchemaValidator

TEST_INDEX = "esschema_unittest_books"

BOOKS_BODY: dict[str, Any] = {
    "mappings": {
        "book": {
            "dynamic": "strict",
            "properties": {
                "title": {
                    "type": "string",
                    "analyzer": "english",
                    "fields": {"raw": {"type": "string", "index": "not_analyzed"}},
                },
                "body": {"type": "string"},
                "published": {"type": "date", "format": "strict_date_optional_time||epoch_millis"},
                "rating": {"type": "double", "null_value": 0.0, "boost": 2.0},
                "pages": {"type": "integer", "doc_values": True, "store": True},
                "author": {
                    "type": "object",
                    "dynamic": "strict",
                    "properties": {"name": {"type": "string"}, "born": {"type": "date"}},
                },
                "location": {"type": "geo_point"},
            },
        }
    }
}


@pytest.fixture(autouse=True)
def clean_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def validator():
    return SchemaValidator()


@pytest.fixture()
def books_body():
    """A fresh copy of the books index body, so tests can change it"""
    return copy.deepcopy(BOOKS_BODY)


@pytest.fixture()
def books(books_body):
    return IndexSchema.from_index_body(TEST_INDEX, books_body)


@pytest.fixture()
def make_schema():
    """Create a schema with a single 'book' mapping with the given properties"""

    def make(properties: dict[str, Any] | None = None, **mapping: Any) -> IndexSchema:
        if properties is not None:
            mapping["properties"] = properties
        return IndexSchema.from_index_body(TEST_INDEX, {"mappings": {"book": mapping}})

    return make


@pytest.fixture()
def findings(validator):
    """Validate, and return the findings by location (empty if valid)"""

    def run(expected: IndexSchema, actual: IndexSchema) -> dict:
        try:
            validator.validate(expected, actual)
        except SchemaValidationError as e:
            return e.findings
        return {}

    return run
