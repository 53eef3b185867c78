import logging
import sys
from pathlib import Path
from typing import Any

import rich_click as click
from ariadne.exceptions import GraphQLFileSyntaxError
from graphql import GraphQLError, GraphQLSchema
from rich.traceback import install

from fedsdl import __version__, log
from fedsdl.errors import FedSDLError
from fedsdl.loader import load_schema, load_schema_from_module, resolve_graphql_files
from fedsdl.options import PrinterOptions
from fedsdl.printer import print_introspection_schema, print_schema


class PathResolverOption(click.Option):
    def process_value(self, ctx: click.Context, value: Any) -> list[Path] | None:
        value = super().process_value(ctx, value)
        if not value:
            return None
        return resolve_graphql_files(list(value))


schema_option = click.option(
    "--schema",
    "-s",
    "schemas",
    type=click.Path(exists=True, path_type=Path),
    cls=PathResolverOption,
    multiple=True,
    help=(
        "The GraphQL schema file or directory containing schema files. Can be specified multiple times. "
        "Files are built as plain GraphQL, so federation directives such as @key are rejected; "
        "print federated schemas with --module."
    ),
)


module_option = click.option(
    "--module",
    "-m",
    "module_target",
    type=str,
    help="Python import path of a GraphQLSchema object, e.g. 'app.schema:schema'.",
)


optional_output_option = click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    required=False,
    help="Output file (defaults to stdout)",
)


@click.group(context_settings={"auto_envvar_prefix": "fedsdl"})
@click.option(
    "-l",
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="WARNING",
    help="Log level",
    show_default=True,
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Log file",
)
@click.version_option(__version__)
def cli(log_level: str, log_file: Path | None) -> None:
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w")
        file_handler.setFormatter(logging.Formatter("%(asctime)s:%(levelname)s:%(message)s"))
        log.addHandler(file_handler)

    log.setLevel(log_level.upper())
    if log_level.upper() == "DEBUG":
        _ = install(show_locals=True)


def _load_input_schema(schemas: list[Path] | None, module_target: str | None) -> GraphQLSchema:
    if bool(schemas) == bool(module_target):
        raise ValueError("Pass either --schema or --module")
    if module_target:
        return load_schema_from_module(module_target)
    return load_schema(schemas or [])


@cli.command(name="print")
@schema_option
@module_option
@optional_output_option
@click.option(
    "--introspection",
    is_flag=True,
    default=False,
    help="Print only the specified directives and introspection types",
)
@click.option(
    "--comment-descriptions",
    is_flag=True,
    default=False,
    help="Render descriptions as # comments instead of block strings",
)
def print_sdl(
    schemas: list[Path] | None,
    module_target: str | None,
    output: Path | None,
    introspection: bool,
    comment_descriptions: bool,
) -> None:
    """Print a schema as federation SDL."""
    try:
        schema = _load_input_schema(schemas, module_target)
        options = PrinterOptions(comment_descriptions=comment_descriptions)
        sdl = print_introspection_schema(schema, options) if introspection else print_schema(schema, options)
    except (FedSDLError, GraphQLError, GraphQLFileSyntaxError, ImportError, ValueError) as e:
        log.error(f"Cannot print schema: {e}")
        log.hint("Run with --log-level DEBUG for more details")
        sys.exit(1)

    if output is None:
        click.echo(sdl, nl=False)
        return

    try:
        output.write_text(sdl)
    except OSError as e:
        log.error(f"File I/O error: {e}")
        sys.exit(1)

    log.success(f"Schema SDL written to {output}")


if __name__ == "__main__":
    cli()
