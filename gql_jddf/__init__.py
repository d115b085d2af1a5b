"""Convert GraphQL introspection results into JDDF schemas."""

__version__ = "0.1.0"
