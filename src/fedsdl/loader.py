import importlib
from pathlib import Path

from ariadne import load_schema_from_path
from graphql import GraphQLSchema, build_schema

from fedsdl import log


def resolve_graphql_files(paths: list[Path]) -> list[Path]:
    """Resolve a list of paths (files and directories) into a flat list of unique GraphQL files.

    Args:
        paths: List of file or directory paths

    Returns:
        Flat list of unique GraphQL file paths, sorted
    """
    resolved_files: set[Path] = set()

    for path in paths:
        if path.is_file():
            resolved_files.add(path)
        elif path.is_dir():
            for file in path.rglob("*.graphql"):
                resolved_files.add(file)

    return sorted(resolved_files)


def build_schema_str(graphql_schema_paths: list[Path]) -> str:
    """Concatenate the SDL of the given GraphQL files."""
    schema_str = ""
    for graphql_file in graphql_schema_paths:
        schema_str += load_schema_from_path(graphql_file) + "\n"
    return schema_str


def load_schema(graphql_schema_paths: Path | list[Path]) -> GraphQLSchema:
    """
    Load and build a GraphQL schema from files or folders.

    Raises:
        ValueError: If the SDL does not validate, e.g. it uses federation directives
    """
    if isinstance(graphql_schema_paths, Path):
        graphql_schema_paths = [graphql_schema_paths]

    schema_str = build_schema_str(resolve_graphql_files(graphql_schema_paths))
    try:
        schema = build_schema(schema_str)
    except TypeError as e:
        # graphql-core reports SDL validation errors (unknown types or directives) as TypeError
        raise ValueError(f"Invalid GraphQL schema: {e}") from e
    log.info("Successfully built the given GraphQL schema files.")
    return schema


def load_schema_from_module(target: str) -> GraphQLSchema:
    """
    Import a schema object given as `package.module:attribute`.

    Args:
        target: Import path of the module and the attribute holding the schema

    Returns:
        GraphQLSchema: The imported schema

    Raises:
        ValueError: If the target is malformed or does not point at a `GraphQLSchema`
    """
    module_name, separator, attribute = target.partition(":")
    if not separator or not module_name or not attribute:
        raise ValueError(f"Expected 'module:attribute', got '{target}'")

    module = importlib.import_module(module_name)
    schema = getattr(module, attribute, None)
    if not isinstance(schema, GraphQLSchema):
        raise ValueError(f"'{target}' is not a GraphQLSchema")

    log.info(f"Loaded schema from {target}")
    return schema
