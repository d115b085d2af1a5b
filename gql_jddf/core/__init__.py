"""Core modules for GraphQL introspection to JDDF conversion."""

from .auth import Auth, BearerAuth, CombinedAuth, HeaderAuth, NoAuth
from .builder import MAX_TYPE_REF_DEPTH, build_type, build_types, resolve_type_ref
from .converter import convert_document, convert_json
from .errors import (
    ConversionError,
    InvalidTypeNodeError,
    MalformedEnvelopeError,
    SchemaSerializationError,
    TypeNestingTooDeepError,
    UnhandledTypeShapeError,
)
from .executor import INTROSPECTION_QUERY, GraphQLError, IntrospectionClient
from .introspection import (
    IntrospectionSchema,
    TypeDescriptor,
    TypeRef,
    loads_document,
    parse_introspection,
)
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
from .sdl import InvalidSdlError, introspection_from_sdl
from .translator import translate, translate_schema

__all__ = [
    # Auth
    "Auth",
    "BearerAuth",
    "CombinedAuth",
    "HeaderAuth",
    "NoAuth",
    # Errors
    "ConversionError",
    "InvalidTypeNodeError",
    "MalformedEnvelopeError",
    "SchemaSerializationError",
    "TypeNestingTooDeepError",
    "UnhandledTypeShapeError",
    # Introspection input
    "IntrospectionSchema",
    "TypeDescriptor",
    "TypeRef",
    "loads_document",
    "parse_introspection",
    # IR types
    "GraphQLType",
    "IREnum",
    "IRInput",
    "IRInterface",
    "IRList",
    "IRNonNull",
    "IRObject",
    "IRRef",
    "IRScalar",
    "IRUnion",
    # Builder
    "MAX_TYPE_REF_DEPTH",
    "build_type",
    "build_types",
    "resolve_type_ref",
    # JDDF forms
    "ElementsForm",
    "EmptyForm",
    "EnumForm",
    "Fragment",
    "JddfSchema",
    "PropertiesForm",
    "RefForm",
    "TypeForm",
    # Translator
    "ScalarRegistry",
    "translate",
    "translate_schema",
    # Converter
    "convert_document",
    "convert_json",
    # SDL
    "InvalidSdlError",
    "introspection_from_sdl",
    # Executor
    "INTROSPECTION_QUERY",
    "GraphQLError",
    "IntrospectionClient",
]
