"""Introspection documents from GraphQL SDL, without a running server."""

from typing import Any

from graphql import GraphQLError, build_schema, introspection_from_schema

from .errors import ConversionError


class InvalidSdlError(ConversionError):
    """The SDL text could not be built into a schema."""


def introspection_from_sdl(sdl: str | bytes) -> dict[str, Any]:
    """Build a schema from SDL and return its introspection response envelope.

    Raises:
        InvalidSdlError: If the SDL is not UTF-8, does not parse or does not
            validate.
    """
    if isinstance(sdl, bytes):
        try:
            sdl = sdl.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidSdlError(f"invalid schema definition: {e}") from e
    try:
        schema = build_schema(sdl)
    except (GraphQLError, TypeError) as e:
        raise InvalidSdlError(f"invalid schema definition: {e}") from e
    return {"data": introspection_from_schema(schema, descriptions=False)}
