"""
Connection between esschema and the elasticsearch backend

The validator itself never talks to elastic: this module fetches the current mapping of an index,
turns it into an IndexSchema and hands it to the validator.
"""

import functools
import logging

from elasticsearch import Elasticsearch

from esschema.config import FailureMode, get_settings
from esschema.models import IndexSchema
from esschema.validator import SchemaValidator, validate_schema

logger = logging.getLogger("esschema.elastic")


class CannotConnectElastic(Exception):
    pass


@functools.lru_cache()
def elastic_connection() -> Elasticsearch:
    try:
        return _setup_elastic()
    except Exception as e:
        raise CannotConnectElastic(f"Cannot connect to elastic {get_settings().elastic_host!r}: {e}") from e


def _connect_elastic() -> Elasticsearch:
    """
    Connect to the elastic server using the system settings
    """
    settings = get_settings()
    if settings.elastic_password:
        return Elasticsearch(
            settings.elastic_host,
            basic_auth=("elastic", settings.elastic_password),
            verify_certs=settings.elastic_verify_ssl,
        )
    else:
        return Elasticsearch(settings.elastic_host or None)


def _setup_elastic() -> Elasticsearch:
    """
    Check whether we can connect with elastic
    """
    settings = get_settings()
    logger.debug(
        f"Connecting with elasticsearch at {settings.elastic_host}, "
        f"password? {'yes' if settings.elastic_password else 'no'} "
    )
    elastic = _connect_elastic()
    if not elastic.ping():
        raise CannotConnectElastic(f"Cannot connect to elasticsearch server {settings.elastic_host}")
    return elastic


def get_current_schema(index: str, elastic: Elasticsearch | None = None) -> IndexSchema:
    """
    Retrieve the mapping of the given index (or alias) from elastic
    """
    if elastic is None:
        elastic = elastic_connection()
    r = elastic.indices.get_mapping(index=index)
    return IndexSchema.from_elastic(index, getattr(r, "body", r))


def validate_index(
    expected: IndexSchema,
    elastic: Elasticsearch | None = None,
    on_failure: FailureMode | None = None,
    validator: SchemaValidator | None = None,
) -> bool:
    """
    Validate the live index named expected.name against the expected schema.
    See validate_schema for how failures are handled.
    """
    actual = get_current_schema(expected.name, elastic)
    return validate_schema(expected, actual, on_failure=on_failure, validator=validator)
