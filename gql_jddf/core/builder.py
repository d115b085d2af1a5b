"""Builds the GraphQL type IR from introspection type descriptors.

Each descriptor is built independently; any malformed descriptor aborts the
whole build.
"""

import logging

from .errors import TypeNestingTooDeepError, UnhandledTypeShapeError
from .introspection import MAX_TYPE_REF_DEPTH, IntrospectionSchema, TypeDescriptor, TypeRef
from .ir import (
    GraphQLType,
    IREnum,
    IRInput,
    IRInterface,
    IRList,
    IRNonNull,
    IRObject,
    IRRef,
    IRScalar,
    IRUnion,
)

logger = logging.getLogger(__name__)


def build_types(schema: IntrospectionSchema) -> list[GraphQLType]:
    """Build one IR node per type descriptor, in document order."""
    nodes = [build_type(descriptor) for descriptor in schema.types]
    logger.debug("Built %d IR nodes", len(nodes))
    return nodes


def build_type(descriptor: TypeDescriptor) -> GraphQLType:
    """Build the IR node for a single named type.

    Raises:
        UnhandledTypeShapeError: If the descriptor's kind does not match the
            fields present on it.
        TypeNestingTooDeepError: If a field type is wrapped too deeply.
    """
    kind = descriptor.kind
    name = descriptor.name
    if name is None:
        raise UnhandledTypeShapeError(f"{kind} type without a name")

    if kind == "SCALAR":
        return IRScalar(name)

    if kind == "OBJECT" and descriptor.fields is not None:
        fields = {}
        for field in descriptor.fields:
            fields[field.name] = resolve_type_ref(field.type, type_name=name)
        return IRObject(name=name, fields=fields)

    if kind == "INTERFACE" and descriptor.possible_types is not None:
        return IRInterface(name=name, impls=_resolve_possible_types(name, descriptor.possible_types))

    if kind == "UNION" and descriptor.possible_types is not None:
        return IRUnion(name=name, types=_resolve_possible_types(name, descriptor.possible_types))

    if kind == "ENUM" and descriptor.enum_values is not None:
        return IREnum(name=name, values=[v.name for v in descriptor.enum_values])

    if kind == "INPUT_OBJECT" and descriptor.input_fields is not None:
        fields = {}
        for input_field in descriptor.input_fields:
            fields[input_field.name] = resolve_type_ref(input_field.type, type_name=name)
        return IRInput(name=name, fields=fields)

    raise UnhandledTypeShapeError(f"unhandled shape for type kind {kind}", type_name=name)


def _resolve_possible_types(name: str, possible_types: list[TypeRef]) -> list[GraphQLType]:
    """Resolve an interface's or union's members; each must be a bare ref."""
    members = []
    for type_ref in possible_types:
        member = resolve_type_ref(type_ref, type_name=name)
        if not isinstance(member, IRRef):
            raise UnhandledTypeShapeError("possible type is not a named type reference", type_name=name)
        members.append(member)
    return members


def resolve_type_ref(
    type_ref: TypeRef,
    depth: int = 0,
    type_name: str | None = None,
) -> GraphQLType:
    """Resolve a type reference chain into nested IR wrappers.

    Args:
        type_ref: The outermost link of the chain
        depth: Number of wrapper levels already unwrapped
        type_name: Owning type, used in error messages

    Returns:
        ``IRRef`` wrapped in ``IRNonNull``/``IRList`` nodes mirroring the chain

    Raises:
        TypeNestingTooDeepError: If the chain has more than
            ``MAX_TYPE_REF_DEPTH`` wrapper levels.
        UnhandledTypeShapeError: If a link is neither named nor a wrapper.
    """
    if type_ref.name is not None:
        return IRRef(type_ref.name)

    if type_ref.kind not in ("NON_NULL", "LIST"):
        raise UnhandledTypeShapeError(
            f"malformed type reference (kind={type_ref.kind})", type_name=type_name
        )

    # A wrapper past the ceiling may arrive with its ofType cut off
    if depth >= MAX_TYPE_REF_DEPTH:
        raise TypeNestingTooDeepError(MAX_TYPE_REF_DEPTH, type_name=type_name)

    if type_ref.of_type is None:
        raise UnhandledTypeShapeError(
            f"wrapper type reference without ofType (kind={type_ref.kind})", type_name=type_name
        )

    inner = resolve_type_ref(type_ref.of_type, depth + 1, type_name)
    if type_ref.kind == "NON_NULL":
        return IRNonNull(inner)
    return IRList(inner)
