"""JDDF schema fragments and their JSON serialization.

Each form serializes to its JSON Data Definition Format representation:

    {"type": "int32"}
    {"properties": {...}, "optionalProperties": {...}, "additionalProperties": false}
    {"elements": {...}}
    {"enum": ["A", "B"]}
    {"ref": "Name"}
    {}

Serialization is deterministic (sorted keys and enum values) so translating
the same IR twice produces byte-identical JSON.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Union

from .errors import SchemaSerializationError

# Primitive type names accepted by the "type" form
JDDF_TYPES = frozenset({
    "boolean",
    "float32",
    "float64",
    "int8",
    "uint8",
    "int16",
    "uint16",
    "int32",
    "uint32",
    "string",
    "timestamp",
})


@dataclass(frozen=True)
class EmptyForm:
    """Accepts any value."""

    def to_serde(self) -> dict[str, Any]:
        return {}


@dataclass(frozen=True)
class TypeForm:
    """A primitive value of the given JDDF type."""
    type: str

    def to_serde(self) -> dict[str, Any]:
        return {"type": self.type}


@dataclass(frozen=True)
class RefForm:
    """A pointer to an entry of the definitions mapping."""
    ref: str

    def to_serde(self) -> dict[str, Any]:
        return {"ref": self.ref}


@dataclass(frozen=True)
class ElementsForm:
    """A homogeneous array."""
    elements: "Fragment"

    def to_serde(self) -> dict[str, Any]:
        return {"elements": self.elements.to_serde()}


@dataclass(frozen=True)
class EnumForm:
    """One of a set of strings."""
    values: frozenset[str]

    def to_serde(self) -> dict[str, Any]:
        return {"enum": sorted(self.values)}


@dataclass(frozen=True)
class PropertiesForm:
    """A JSON object with required and optional members."""
    required: dict[str, "Fragment"] = field(default_factory=dict)
    optional: dict[str, "Fragment"] = field(default_factory=dict)
    allow_additional: bool = False

    def to_serde(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "properties": {k: v.to_serde() for k, v in sorted(self.required.items())},
        }
        if self.optional:
            out["optionalProperties"] = {k: v.to_serde() for k, v in sorted(self.optional.items())}
        out["additionalProperties"] = self.allow_additional
        return out


Fragment = Union[EmptyForm, TypeForm, RefForm, ElementsForm, EnumForm, PropertiesForm]


@dataclass(frozen=True)
class JddfSchema:
    """A complete schema: named definitions plus the root form."""
    definitions: dict[str, Fragment]
    root: Fragment

    def to_serde(self) -> dict[str, Any]:
        out = {"definitions": {k: v.to_serde() for k, v in sorted(self.definitions.items())}}
        out.update(self.root.to_serde())
        return out

    def to_json(self, indent: int | None = None) -> str:
        """Serialize to a JSON string.

        Raises:
            SchemaSerializationError: If a fragment is not JSON-serializable.
        """
        try:
            return json.dumps(self.to_serde(), indent=indent, sort_keys=True)
        except (TypeError, ValueError, AttributeError) as e:
            raise SchemaSerializationError(f"cannot serialize schema: {e}") from e
