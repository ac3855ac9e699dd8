"""
In-memory representation of an Elasticsearch index schema.

An index holds named type mappings, a type mapping holds a dynamic flag and named properties, and a property
holds its own attributes plus (for object fields) a nested dynamic flag and properties, and (for multi-fields)
named sub-fields. The same models are used for the expected schema and for the schema reported by Elasticsearch.

Attributes we don't model (e.g. search_analyzer, copy_to, ...) are silently dropped when parsing,
which means they are never validated either.
Values we don't know for type, index or dynamic (e.g. newer data types such as "nested" or "ip")
are kept as plain strings, so they compare unequal to anything we expect instead of failing to parse.
"""

from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Name used for the single mapping of a typeless (Elasticsearch 7+) index
DEFAULT_MAPPING_NAME = "_doc"

# Parameters that can only appear at the root of a typeless mapping (a typed mapping has type names there)
ROOT_MAPPING_PARAMETERS = {
    "properties",
    "dynamic",
    "dynamic_templates",
    "dynamic_date_formats",
    "date_detection",
    "numeric_detection",
    "runtime",
    "subobjects",
    "enabled",
    "_all",
    "_data_stream_timestamp",
    "_field_names",
    "_meta",
    "_routing",
    "_source",
    "_size",
}


class ElasticEnum(str, Enum):
    def __str__(self) -> str:
        return self.value


class DataType(ElasticEnum):
    STRING = "string"
    INTEGER = "integer"
    LONG = "long"
    DOUBLE = "double"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATE = "date"
    OBJECT = "object"
    GEO_POINT = "geo_point"


class DynamicType(ElasticEnum):
    TRUE = "true"
    FALSE = "false"
    STRICT = "strict"


class IndexType(ElasticEnum):
    ANALYZED = "analyzed"
    NOT_ANALYZED = "not_analyzed"
    NO = "no"


JsonPrimitive = bool | int | float | str
NullValue = JsonPrimitive | list[Any] | dict[str, Any] | None


class TypeMapping(BaseModel):
    """The structural definition of one document type (or of the inside of an object field)"""

    model_config = ConfigDict(frozen=True)

    dynamic: DynamicType | str | None = Field(default=None, union_mode="left_to_right")
    properties: Optional[dict[str, "PropertyMapping"]] = None

    @field_validator("dynamic", mode="before")
    @classmethod
    def parse_dynamic(cls, value: Any) -> Any:
        # elastic reports dynamic as a json boolean or as a string, depending on how it was set
        if isinstance(value, bool):
            return "true" if value else "false"
        return value


class PropertyMapping(TypeMapping):
    """
    A single field. Object fields use the inherited dynamic and properties attributes,
    multi-fields (the same value indexed in another way) are listed in fields.
    """

    type: DataType | str | None = Field(default=None, union_mode="left_to_right")
    format: list[str] | None = None
    boost: float | None = None
    index: IndexType | str | None = Field(default=None, union_mode="left_to_right")
    doc_values: bool | None = None
    store: bool | None = None
    null_value: NullValue = None
    analyzer: str | None = None
    fields: Optional[dict[str, "PropertyMapping"]] = None

    @field_validator("format", mode="before")
    @classmethod
    def parse_format(cls, value: Any) -> Any:
        # elastic joins multiple date formats with '||'
        if isinstance(value, str):
            return [f.strip() for f in value.split("||")]
        return value

    @field_validator("index", mode="before")
    @classmethod
    def parse_index(cls, value: Any) -> Any:
        # since elastic 5, index is a json boolean
        if isinstance(value, bool):
            return "true" if value else "false"
        return value


TypeMapping.model_rebuild()
PropertyMapping.model_rebuild()


class IndexSchema(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    mappings: dict[str, TypeMapping] = {}

    @classmethod
    def from_index_body(cls, name: str, body: Mapping[str, Any]) -> "IndexSchema":
        """
        Create a schema from an index body, i.e. {"mappings": {...}} as used to create the index.
        Both typed ({"mappings": {"my_type": {"properties": ...}}}) and typeless
        ({"mappings": {"properties": ...}}) mappings are understood; a typeless mapping is
        stored under DEFAULT_MAPPING_NAME. An empty mapping is read as an empty typeless mapping,
        which is what elastic 7+ reports for an index without fields.
        """
        mappings = body.get("mappings") or {}
        if not mappings or _is_typeless(mappings):
            mappings = {DEFAULT_MAPPING_NAME: mappings}
        return cls(name=name, mappings={k: TypeMapping.model_validate(v) for k, v in mappings.items()})

    @classmethod
    def from_elastic(cls, name: str, response: Mapping[str, Any]) -> "IndexSchema":
        """
        Create a schema from the result of indices.get_mapping(index=name).
        If name is an alias, elastic answers with the concrete index name, which is accepted if it is the only one.
        """
        if name in response:
            body = response[name]
        elif len(response) == 1:
            body = next(iter(response.values()))
        else:
            raise ValueError(f"Mapping response does not contain index {name!r} (got: {', '.join(response)})")
        return cls.from_index_body(name, body)


def _is_typeless(mappings: Mapping[str, Any]) -> bool:
    return any(key in ROOT_MAPPING_PARAMETERS for key in mappings)
