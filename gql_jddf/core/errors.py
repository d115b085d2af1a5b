"""Errors raised while converting an introspection document to JDDF.

Every error is fatal: the converter never emits a partial schema.
"""


class ConversionError(Exception):
    """Base class for all conversion failures."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class MalformedEnvelopeError(ConversionError):
    """The document lacks ``data``, ``data.schema`` or ``queryType.name``."""


class UnhandledTypeShapeError(ConversionError):
    """A type descriptor or type reference does not match its declared kind."""

    def __init__(self, message: str, type_name: str | None = None):
        self.type_name = type_name
        if type_name:
            message = f"{type_name}: {message}"
        super().__init__(message)


class TypeNestingTooDeepError(ConversionError):
    """A type reference chain has more wrapper levels than allowed."""

    def __init__(self, max_depth: int, type_name: str | None = None):
        self.max_depth = max_depth
        self.type_name = type_name
        message = f"type nesting too deep (more than {max_depth} wrapper levels)"
        if type_name:
            message = f"{type_name}: {message}"
        super().__init__(message)


class InvalidTypeNodeError(ConversionError):
    """A wrapper node reached translation outside of a field context."""


class SchemaSerializationError(ConversionError):
    """Input JSON could not be decoded, or output could not be encoded."""
