"""Intermediate Representation (IR) for GraphQL types.

One node per named type in the introspection document, plus the
``IRNonNull``/``IRList`` wrappers that only ever appear nested inside a
field or possible-type reference.
"""

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class IRRef:
    """Reference to a named type, resolved lazily by the schema consumer."""
    name: str


@dataclass(frozen=True)
class IRScalar:
    """Represents a built-in or custom GraphQL scalar."""
    name: str


@dataclass(frozen=True)
class IRObject:
    """Represents a GraphQL object type."""
    name: str
    fields: dict[str, "GraphQLType"] = field(default_factory=dict)


@dataclass(frozen=True)
class IRInterface:
    """Represents a GraphQL interface; ``impls`` holds ``IRRef`` nodes."""
    name: str
    impls: list["GraphQLType"] = field(default_factory=list)


@dataclass(frozen=True)
class IRUnion:
    """Represents a GraphQL union; ``types`` holds ``IRRef`` nodes."""
    name: str
    types: list["GraphQLType"] = field(default_factory=list)


@dataclass(frozen=True)
class IREnum:
    """Represents a GraphQL enum, values in declared order."""
    name: str
    values: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class IRInput:
    """Represents a GraphQL input object type."""
    name: str
    fields: dict[str, "GraphQLType"] = field(default_factory=dict)


@dataclass(frozen=True)
class IRNonNull:
    """Non-null wrapper (``Type!``)."""
    inner: "GraphQLType"


@dataclass(frozen=True)
class IRList:
    """List wrapper (``[Type]``)."""
    inner: "GraphQLType"


GraphQLType = Union[
    IRRef,
    IRScalar,
    IRObject,
    IRInterface,
    IRUnion,
    IREnum,
    IRInput,
    IRNonNull,
    IRList,
]

# Nodes that may appear as entries of the named-type collection
NAMED_TYPES = (IRScalar, IRObject, IRInterface, IRUnion, IREnum, IRInput)
