"""End-to-end conversion of an introspection document into a JDDF schema."""

import logging
from typing import Any

from .builder import build_types
from .introspection import loads_document, parse_introspection
from .jddf import JddfSchema
from .scalars import ScalarRegistry
from .translator import translate_schema

logger = logging.getLogger(__name__)


def convert_document(document: dict[str, Any], scalars: ScalarRegistry | None = None) -> JddfSchema:
    """Convert a decoded introspection response into a JDDF schema.

    Raises:
        ConversionError: Any subclass; no partial schema is returned.
    """
    schema = parse_introspection(document)
    nodes = build_types(schema)
    result = translate_schema(nodes, schema.query_type_name, scalars)
    logger.debug(
        "Converted %d types, root %s", len(result.definitions), schema.query_type_name
    )
    return result


def convert_json(text: str | bytes, scalars: ScalarRegistry | None = None, indent: int | None = None) -> str:
    """Convert introspection JSON text into JDDF schema JSON text."""
    return convert_document(loads_document(text), scalars).to_json(indent=indent)
