"""Shared builders for introspection test documents."""

import pytest


def named(name, kind="SCALAR"):
    """Innermost type reference link."""
    return {"kind": kind, "name": name, "ofType": None}


def non_null(of_type):
    return {"kind": "NON_NULL", "name": None, "ofType": of_type}


def list_of(of_type):
    return {"kind": "LIST", "name": None, "ofType": of_type}


def wrap(type_ref, depth, kind="NON_NULL"):
    """Wrap a type reference in ``depth`` alternating wrappers starting with ``kind``."""
    kinds = ["NON_NULL", "LIST"] if kind == "NON_NULL" else ["LIST", "NON_NULL"]
    for level in range(depth):
        type_ref = {"kind": kinds[(depth - 1 - level) % 2], "name": None, "ofType": type_ref}
    return type_ref


def object_type(name, fields, kind="OBJECT"):
    key = "inputFields" if kind == "INPUT_OBJECT" else "fields"
    return {
        "kind": kind,
        "name": name,
        key: [{"name": field_name, "type": type_ref} for field_name, type_ref in fields.items()],
    }


def document(types, query_type="Query", key="schema"):
    return {"data": {key: {"queryType": {"name": query_type}, "types": types}}}


@pytest.fixture
def query_document():
    """``type Query { id: String!, tags: [Int] }``."""
    return document([
        object_type("Query", {
            "id": non_null(named("String")),
            "tags": list_of(named("Int")),
        }),
        {"kind": "SCALAR", "name": "String"},
        {"kind": "SCALAR", "name": "Int"},
    ])
