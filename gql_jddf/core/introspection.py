"""Pydantic models for the introspection document.

Only the parts of the ``__schema`` response the converter reads are
modelled; descriptions, directives, arguments and deprecation metadata are
ignored.
"""

import json
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .errors import MalformedEnvelopeError, SchemaSerializationError, UnhandledTypeShapeError

logger = logging.getLogger(__name__)

# Wrapper levels requested by the standard introspection query's TypeRef fragment
MAX_TYPE_REF_DEPTH = 8


def truncate_type_ref(raw: Any, max_depth: int = MAX_TYPE_REF_DEPTH) -> Any:
    """Copy a raw type reference, cutting the chain below ``max_depth`` wrappers.

    The link at position ``max_depth`` keeps its kind and name but loses its
    ``ofType``, so an over-deep chain is reported by the builder as too deep
    instead of being validated link by link. The input is not modified.
    """
    if not isinstance(raw, dict):
        return raw
    head = dict(raw)
    link = head
    for _ in range(max_depth):
        of_type = link.get("ofType")
        if not isinstance(of_type, dict):
            return head
        copied = dict(of_type)
        link["ofType"] = copied
        link = copied
    link["ofType"] = None
    return head


class _IntrospectionModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class TypeRef(_IntrospectionModel):
    """One link of a type reference chain.

    Wrapper links (``NON_NULL``, ``LIST``) carry ``of_type``; the innermost
    link carries a ``name``.
    """

    kind: str | None = None
    name: str | None = None
    of_type: "TypeRef | None" = Field(default=None, alias="ofType")


class FieldDescriptor(_IntrospectionModel):
    """A field of an OBJECT (or INTERFACE) type."""

    name: str
    type: TypeRef


class InputValueDescriptor(_IntrospectionModel):
    """A field of an INPUT_OBJECT type."""

    name: str
    type: TypeRef


class EnumValueDescriptor(_IntrospectionModel):
    name: str


class TypeDescriptor(_IntrospectionModel):
    """A named type as returned by ``__schema { types { ... } }``."""

    kind: str
    name: str | None = None
    fields: list[FieldDescriptor] | None = None
    possible_types: list[TypeRef] | None = Field(default=None, alias="possibleTypes")
    enum_values: list[EnumValueDescriptor] | None = Field(default=None, alias="enumValues")
    input_fields: list[InputValueDescriptor] | None = Field(default=None, alias="inputFields")

    @model_validator(mode="before")
    @classmethod
    def _truncate_type_refs(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for key in ("fields", "inputFields"):
            if isinstance(data.get(key), list):
                data[key] = [
                    {**item, "type": truncate_type_ref(item["type"])}
                    if isinstance(item, dict) and "type" in item else item
                    for item in data[key]
                ]
        if isinstance(data.get("possibleTypes"), list):
            data["possibleTypes"] = [truncate_type_ref(ref) for ref in data["possibleTypes"]]
        return data


class RootType(_IntrospectionModel):
    name: str | None = None


class IntrospectionSchema(_IntrospectionModel):
    """The ``schema`` object of an introspection response."""

    query_type: RootType | None = Field(default=None, alias="queryType")
    types: list[TypeDescriptor] = Field(default_factory=list)

    @property
    def query_type_name(self) -> str:
        """Return the root query type name (validated on load)."""
        if self.query_type is None or self.query_type.name is None:
            raise MalformedEnvelopeError("no query type name in graphql response")
        return self.query_type.name


def loads_document(text: str | bytes) -> dict[str, Any]:
    """Decode a JSON introspection document."""
    try:
        document = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise SchemaSerializationError(f"invalid JSON input: {e}") from e
    except RecursionError as e:
        raise SchemaSerializationError("invalid JSON input: document is nested too deeply") from e
    if not isinstance(document, dict):
        raise MalformedEnvelopeError("graphql response is not a JSON object")
    return document


def parse_introspection(document: dict[str, Any]) -> IntrospectionSchema:
    """Extract and validate the schema object from an introspection response.

    Accepts both ``data.schema`` (aliased query) and ``data.__schema`` (the
    standard introspection query).

    Raises:
        MalformedEnvelopeError: If ``data``, the schema or the query type
            name is missing.
        UnhandledTypeShapeError: If a type descriptor cannot be read at all.
    """
    data = document.get("data")
    if not isinstance(data, dict):
        raise MalformedEnvelopeError("no data in graphql response")

    raw_schema = data.get("schema")
    if raw_schema is None:
        raw_schema = data.get("__schema")
    if not isinstance(raw_schema, dict):
        raise MalformedEnvelopeError("no schema in graphql response")

    try:
        schema = IntrospectionSchema.model_validate(raw_schema)
    except ValidationError as e:
        locations = [err["loc"] for err in e.errors()]
        if locations and all(len(loc) > 1 and loc[0] == "types" for loc in locations):
            raise UnhandledTypeShapeError(f"unreadable type descriptor: {e}") from e
        raise MalformedEnvelopeError(f"invalid schema in graphql response: {e}") from e

    if schema.query_type is None or schema.query_type.name is None:
        raise MalformedEnvelopeError("no query type name in graphql response")
    logger.debug("Loaded introspection schema with %d types", len(schema.types))
    return schema
