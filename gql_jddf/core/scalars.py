"""GraphQL scalar to JDDF type mapping.

Built-in scalars map to fixed JDDF primitives. Custom scalars carry no
structure in an introspection response, so they translate to the empty form
unless a mapping is registered for them.

Example usage:
    from gql_jddf.core.scalars import ScalarRegistry

    registry = ScalarRegistry()
    registry.register("DateTime", "timestamp")

    registry.get("Int")       # "int32"
    registry.get("DateTime")  # "timestamp"
    registry.get("JSON")      # None -> empty form
"""

from .jddf import JDDF_TYPES

BUILTIN_SCALARS = {
    "Int": "int32",
    "Float": "float64",
    "Boolean": "boolean",
    "String": "string",
    "ID": "string",
}


class ScalarRegistry:
    """Registry of GraphQL scalar name to JDDF type name mappings.

    Example:
        registry = ScalarRegistry()
        registry.register("Date", "string")

        jddf_type = registry.get("Date")  # "string"
    """

    def __init__(self):
        self._types: dict[str, str] = {}
        self._register_defaults()

    def _register_defaults(self):
        """Register the GraphQL built-in scalars."""
        for scalar_name, jddf_type in BUILTIN_SCALARS.items():
            self.register(scalar_name, jddf_type)

    def register(self, scalar_name: str, jddf_type: str):
        """Register a JDDF type for a scalar.

        Raises:
            ValueError: If ``jddf_type`` is not a JDDF primitive type name.
        """
        if jddf_type not in JDDF_TYPES:
            raise ValueError(
                f"Unknown JDDF type {jddf_type!r} for scalar {scalar_name!r}; "
                f"expected one of {', '.join(sorted(JDDF_TYPES))}"
            )
        self._types[scalar_name] = jddf_type

    def get(self, scalar_name: str) -> str | None:
        """Get the JDDF type for a scalar, or None if it is unconstrained."""
        return self._types.get(scalar_name)

    def has(self, scalar_name: str) -> bool:
        """Check if a mapping is registered for a scalar."""
        return scalar_name in self._types


def parse_scalar_mapping(text: str) -> tuple[str, str]:
    """Parse a ``NAME=TYPE`` command-line mapping."""
    scalar_name, sep, jddf_type = text.partition("=")
    scalar_name, jddf_type = scalar_name.strip(), jddf_type.strip()
    if not sep or not scalar_name or not jddf_type:
        raise ValueError(f"Invalid scalar mapping {text!r}; expected NAME=TYPE")
    return scalar_name, jddf_type
