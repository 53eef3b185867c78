"""Tests for printing whole schemas."""

import re

import pytest
from ariadne import gql
from graphql import (
    DirectiveLocation,
    GraphQLArgument,
    GraphQLDirective,
    GraphQLField,
    GraphQLInt,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLString,
    build_schema,
)

from fedsdl.federation.schema import FederatedSchema
from fedsdl.options import PrinterOptions
from fedsdl.printer import print_directive, print_introspection_schema, print_schema
from fedsdl.printer.filters import (
    INTROSPECTION_FILTERS,
    STANDARD_FILTERS,
    filter_directives,
    filter_types,
)
from tests.conftest import EPISODES_SDL, build_episodes_schema

CACHE_CONTROL = GraphQLDirective(
    "cacheControl",
    [DirectiveLocation.FIELD_DEFINITION, DirectiveLocation.OBJECT],
    args={"maxAge": GraphQLArgument(GraphQLInt)},
)


class TestPrintSchema:
    def test_episodes_schema(self, episodes_schema: FederatedSchema) -> None:
        assert print_schema(episodes_schema) == EPISODES_SDL

    def test_entity_and_plain_types(self, episodes_schema: FederatedSchema) -> None:
        sdl = print_schema(episodes_schema)

        assert 'type Episode @key(fields: "id") {' in sdl
        assert "type Character {" in sdl
        query_block = sdl[sdl.index("extend type Query {") :]
        assert "_service" not in query_block
        assert "_entities" not in query_block

    def test_printing_is_deterministic(self) -> None:
        assert print_schema(build_episodes_schema()) == print_schema(build_episodes_schema())

    def test_types_are_sorted_by_name(self) -> None:
        zebra = GraphQLObjectType("Zebra", {"stripes": GraphQLField(GraphQLInt)})
        apple = GraphQLObjectType("Apple", {"seeds": GraphQLField(GraphQLInt)})
        query = GraphQLObjectType("Query", {"hello": GraphQLField(GraphQLString)})

        forward = print_schema(GraphQLSchema(query, types=[zebra, apple]))
        backward = print_schema(GraphQLSchema(query, types=[apple, zebra]))

        assert forward == backward
        assert forward.index("type Apple") < forward.index("extend type Query") < forward.index("type Zebra")

    def test_built_ins_and_federation_members_are_left_out(self, episodes_schema: FederatedSchema) -> None:
        sdl = print_schema(episodes_schema)

        for unexpected in (
            "directive @include",
            "directive @skip",
            "directive @deprecated",
            "directive @key",
            "directive @external",
            "directive @provides",
            "directive @requires",
            "scalar String",
            "scalar Int",
            "scalar _Any",
            "type _Service",
            "union _Entity",
            "__Schema",
        ):
            assert unexpected not in sdl

    def test_custom_directives_come_first(self) -> None:
        schema = build_schema(
            '''
            directive @cacheControl(maxAge: Int) on FIELD_DEFINITION

            """A user"""
            type User { id: ID! }

            type Query { me: User }
            '''
        )

        assert print_schema(schema) == (
            "directive @cacheControl(maxAge: Int) on FIELD_DEFINITION\n\n"
            "extend type Query {\n  me: User\n}\n\n"
            '"""A user"""\ntype User {\n  id: ID!\n}\n'
        )

    def test_comment_descriptions(self, episodes_schema: FederatedSchema) -> None:
        sdl = print_schema(episodes_schema, {"commentDescriptions": True})

        assert "# A film in the Star Wars Trilogy\ntype Episode" in sdl
        assert '"""' not in sdl

    def test_output_is_valid_sdl(self, episodes_schema: FederatedSchema) -> None:
        sdl = print_schema(episodes_schema)

        assert gql(sdl) == sdl

    def test_defaults_from_sdl(self) -> None:
        schema = build_schema(
            """
            input ReviewInput { stars: Int = 5, tags: [String] = ["new"] }

            type Query { reviews(first: Int = 10, after: String = "start", filter: ReviewInput): [String] }
            """
        )

        assert print_schema(schema) == (
            "extend type Query {\n"
            '  reviews(first: Int = 10, after: String = "start", filter: ReviewInput): [String]\n'
            "}\n\n"
            "input ReviewInput {\n"
            "  stars: Int = 5\n"
            '  tags: [String] = ["new"]\n'
            "}\n"
        )

    def test_schema_with_only_federation_machinery(self) -> None:
        schema = FederatedSchema(query=GraphQLObjectType("Query", {}))

        assert print_schema(schema) == "\n"


class TestPrintIntrospectionSchema:
    def test_only_introspection_members(self, episodes_schema: FederatedSchema) -> None:
        sdl = print_introspection_schema(episodes_schema)

        assert "directive @include(" in sdl
        assert "directive @skip(" in sdl
        assert "type __Schema {" in sdl
        assert "enum __TypeKind {" in sdl
        assert "Episode" not in sdl
        assert "directive @key" not in sdl
        assert "scalar String" not in sdl
        assert sdl.endswith("}\n")

    def test_comment_descriptions(self, episodes_schema: FederatedSchema) -> None:
        sdl = print_introspection_schema(episodes_schema, PrinterOptions(comment_descriptions=True))

        assert '"""' not in sdl
        assert "\n# " in sdl


    def test_introspection_defaults_are_kept(self, episodes_schema: FederatedSchema) -> None:
        sdl = print_introspection_schema(episodes_schema)

        assert re.search(r"  fields\(includeDeprecated: Boolean!? = false\): \[__Field!\]", sdl)
        assert re.search(r"  enumValues\(includeDeprecated: Boolean!? = false\): \[__EnumValue!\]", sdl)


class TestPrintDirective:
    def test_directive(self) -> None:
        assert print_directive(CACHE_CONTROL) == "directive @cacheControl(maxAge: Int) on FIELD_DEFINITION | OBJECT"

    def test_repeatable_directive_with_description(self) -> None:
        directive = GraphQLDirective(
            "tag",
            [DirectiveLocation.OBJECT],
            args={"name": GraphQLArgument(GraphQLString, description="The tag")},
            is_repeatable=True,
            description="Tags a type",
        )

        assert print_directive(directive) == (
            '"""Tags a type"""\ndirective @tag(\n  """The tag"""\n  name: String\n) repeatable on OBJECT'
        )


class TestFilters:
    @pytest.fixture
    def schema(self) -> GraphQLSchema:
        query = GraphQLObjectType("Query", {"hello": GraphQLField(GraphQLString)})
        return FederatedSchema(query=query, directives=[CACHE_CONTROL])

    def test_standard_directives(self, schema: GraphQLSchema) -> None:
        directives = filter_directives(schema, STANDARD_FILTERS.directive_filter)

        assert [directive.name for directive in directives] == ["cacheControl"]

    def test_standard_types(self, schema: GraphQLSchema) -> None:
        types = filter_types(schema, STANDARD_FILTERS.type_filter)

        assert [type_.name for type_ in types] == ["Query", "_Any", "_Service"]

    def test_introspection_directives(self, schema: GraphQLSchema) -> None:
        names = {directive.name for directive in filter_directives(schema, INTROSPECTION_FILTERS.directive_filter)}

        assert {"include", "skip", "deprecated"} <= names
        assert not names & {"cacheControl", "key", "external", "provides", "requires"}

    def test_introspection_types(self, schema: GraphQLSchema) -> None:
        names = [type_.name for type_ in filter_types(schema, INTROSPECTION_FILTERS.type_filter)]

        assert names == sorted(names)
        assert all(name.startswith("__") for name in names)
        assert "__Schema" in names
