#!/usr/bin/env python3
"""Demonstration of converting a GraphQL schema into a JDDF schema.

This script shows how to:
1. Produce an introspection result from SDL (no server needed)
2. Build the type IR and translate it
3. Print the resulting JDDF schema
"""

from gql_jddf.core import (
    ScalarRegistry,
    build_types,
    introspection_from_sdl,
    parse_introspection,
    translate_schema,
)

SDL = """
type Query {
  me: User!
  search(term: String!): [SearchResult!]!
}

type User {
  id: ID!
  name: String
  joined: DateTime!
  friends: [User!]
}

type Post {
  id: ID!
  title: String!
}

union SearchResult = User | Post

scalar DateTime
"""


def main():
    document = introspection_from_sdl(SDL)
    schema = parse_introspection(document)

    nodes = build_types(schema)
    print(f"Built {len(nodes)} types, root: {schema.query_type_name}")

    scalars = ScalarRegistry()
    scalars.register("DateTime", "timestamp")

    jddf_schema = translate_schema(nodes, schema.query_type_name, scalars)

    # Only show the user-defined types
    user_types = {k: v for k, v in jddf_schema.definitions.items() if not k.startswith("__")}
    for name, fragment in sorted(user_types.items()):
        print(f"  {name}: {fragment.to_serde()}")


if __name__ == "__main__":
    main()
