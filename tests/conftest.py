from dataclasses import dataclass

import pytest
from graphql import (
    GraphQLField,
    GraphQLInt,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLString,
)

from fedsdl.federation import EntityObjectType, EntityRefObjectType, federated_field
from fedsdl.federation.schema import FederatedSchema
from fedsdl.options import PrinterOptions

EPISODES_SDL = '''type Character {
  id: Int!
  name: String
  locations: [Location!]!
}

"""A film in the Star Wars Trilogy"""
type Episode @key(fields: "id") {
  id: Int!
  title: String!
  characters: [Character!]! @provides(fields: "name")
}

extend type Location @key(fields: "id") {
  id: Int! @external
  name: String @external
}

extend type Query {
  episodes: [Episode!]!
  deprecatedEpisodes: [Episode!]! @deprecated(reason: "Use episodes")
}
'''


@dataclass
class Described:
    """Stand-in for anything carrying a description."""

    description: str | None


def nn_list_of(type_: GraphQLObjectType) -> GraphQLNonNull:
    return GraphQLNonNull(GraphQLList(GraphQLNonNull(type_)))


def build_episodes_schema() -> FederatedSchema:
    location = EntityRefObjectType(
        "Location",
        {
            "id": federated_field(GraphQLNonNull(GraphQLInt), external=True),
            "name": federated_field(GraphQLString, external=True),
        },
        key_fields=["id"],
    )
    character = GraphQLObjectType(
        "Character",
        {
            "id": GraphQLField(GraphQLNonNull(GraphQLInt)),
            "name": GraphQLField(GraphQLString),
            "locations": GraphQLField(nn_list_of(location)),
        },
    )
    episode = EntityObjectType(
        "Episode",
        {
            "id": GraphQLField(GraphQLNonNull(GraphQLInt)),
            "title": GraphQLField(GraphQLNonNull(GraphQLString)),
            "characters": federated_field(nn_list_of(character), provides="name"),
        },
        key_fields=["id"],
        description="A film in the Star Wars Trilogy",
    )
    query = GraphQLObjectType(
        "Query",
        {
            "episodes": GraphQLField(nn_list_of(episode)),
            "deprecatedEpisodes": GraphQLField(nn_list_of(episode), deprecation_reason="Use episodes"),
        },
    )
    return FederatedSchema(query=query)


@pytest.fixture
def episodes_schema() -> FederatedSchema:
    return build_episodes_schema()


@pytest.fixture(scope="module")
def options() -> PrinterOptions:
    return PrinterOptions()


@pytest.fixture(scope="module")
def comment_options() -> PrinterOptions:
    return PrinterOptions(comment_descriptions=True)
