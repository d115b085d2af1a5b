"""Translates GraphQL type IR into JDDF schema fragments.

Refs are never expanded here: the schema consumer resolves them against the
definitions mapping, so self-referencing types need no special handling.
"""

import logging

from .errors import InvalidTypeNodeError
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
    NAMED_TYPES,
)
from .jddf import (
    ElementsForm,
    EmptyForm,
    EnumForm,
    Fragment,
    JddfSchema,
    PropertiesForm,
    RefForm,
    TypeForm,
)
from .scalars import ScalarRegistry

logger = logging.getLogger(__name__)


def translate(node: GraphQLType, scalars: ScalarRegistry | None = None) -> Fragment:
    """Translate one IR node into a JDDF fragment.

    Raises:
        InvalidTypeNodeError: If a bare ``IRNonNull`` is reached, or the node
            is not an IR type at all.
    """
    if scalars is None:
        scalars = ScalarRegistry()

    if isinstance(node, IRRef):
        return RefForm(node.name)

    if isinstance(node, IRScalar):
        jddf_type = scalars.get(node.name)
        if jddf_type is None:
            return EmptyForm()
        return TypeForm(jddf_type)

    if isinstance(node, (IRObject, IRInput)):
        return _translate_fields(node.fields, scalars)

    if isinstance(node, IRList):
        # Item nullability is not expressible, nullable items stay unconstrained
        if isinstance(node.inner, IRNonNull):
            return ElementsForm(translate(node.inner.inner, scalars))
        return ElementsForm(EmptyForm())

    # TODO: emit a discriminated shape once possible types can be told apart
    if isinstance(node, (IRInterface, IRUnion)):
        return EmptyForm()

    if isinstance(node, IREnum):
        return EnumForm(frozenset(node.values))

    if isinstance(node, IRNonNull):
        raise InvalidTypeNodeError("non-null wrapper outside of a field type")

    raise InvalidTypeNodeError(f"not a GraphQL type node: {node!r}")


def _translate_fields(fields: dict[str, GraphQLType], scalars: ScalarRegistry) -> PropertiesForm:
    """Split fields into required (non-null) and optional properties."""
    required = {}
    optional = {}
    for name, field_type in fields.items():
        if isinstance(field_type, IRNonNull):
            required[name] = translate(field_type.inner, scalars)
        else:
            optional[name] = translate(field_type, scalars)
    return PropertiesForm(required=required, optional=optional, allow_additional=False)


def translate_schema(
    nodes: list[GraphQLType],
    root_name: str,
    scalars: ScalarRegistry | None = None,
) -> JddfSchema:
    """Translate every named IR node into a complete JDDF schema.

    Later nodes with a duplicate name replace earlier ones.

    Raises:
        InvalidTypeNodeError: If a wrapper node appears in ``nodes``.
    """
    if scalars is None:
        scalars = ScalarRegistry()

    definitions: dict[str, Fragment] = {}
    for node in nodes:
        if not isinstance(node, NAMED_TYPES):
            raise InvalidTypeNodeError(f"not a named type: {node!r}")
        name = node.name
        if name in definitions:
            logger.warning("Duplicate type name %s, keeping the last definition", name)
        logger.debug("Translating %s %s", type(node).__name__, name)
        definitions[name] = translate(node, scalars)

    return JddfSchema(definitions=definitions, root=RefForm(root_name))
