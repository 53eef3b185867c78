from pathlib import Path

import pytest
from graphql import GraphQLSchema

from fedsdl.loader import load_schema, load_schema_from_module, resolve_graphql_files

TESTS_DATA = Path(__file__).parent / "data"
EPISODES = TESTS_DATA / "episodes.graphql"


def test_resolve_graphql_files(tmp_path: Path) -> None:
    nested = tmp_path / "nested"
    nested.mkdir()
    (tmp_path / "b.graphql").write_text("type B { id: ID }")
    (nested / "a.graphql").write_text("type A { id: ID }")
    (tmp_path / "notes.txt").write_text("not a schema")

    files = resolve_graphql_files([tmp_path, tmp_path / "b.graphql"])

    assert files == sorted([tmp_path / "b.graphql", nested / "a.graphql"])


def test_load_schema() -> None:
    schema = load_schema(EPISODES)

    assert schema.query_type is not None
    assert schema.get_type("Episode") is not None


def test_load_schema_from_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "fedsdl_loader_sample.py").write_text(
        "from graphql import build_schema\nschema = build_schema('type Query { hello: String }')\nname = 'x'\n"
    )
    monkeypatch.syspath_prepend(str(tmp_path))

    assert isinstance(load_schema_from_module("fedsdl_loader_sample:schema"), GraphQLSchema)

    with pytest.raises(ValueError, match="is not a GraphQLSchema"):
        load_schema_from_module("fedsdl_loader_sample:name")


@pytest.mark.parametrize("target", ["no_attribute", ":schema", "module:"])
def test_load_schema_from_module_malformed(target: str) -> None:
    with pytest.raises(ValueError, match="Expected 'module:attribute'"):
        load_schema_from_module(target)


def test_load_schema_with_federation_directives(tmp_path: Path) -> None:
    subgraph = tmp_path / "subgraph.graphql"
    subgraph.write_text('type User @key(fields: "id") @shareable { id: ID! }\n\ntype Query { me: User }\n')

    with pytest.raises(ValueError, match="Invalid GraphQL schema"):
        load_schema(subgraph)
