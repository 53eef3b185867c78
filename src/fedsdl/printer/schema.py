from collections.abc import Mapping
from typing import Any

from graphql import GraphQLDirective, GraphQLSchema

from fedsdl import log
from fedsdl.options import PrinterOptions, resolve_options
from fedsdl.printer.description import print_description
from fedsdl.printer.filters import (
    INTROSPECTION_FILTERS,
    STANDARD_FILTERS,
    SchemaFilters,
    filter_directives,
    filter_types,
)
from fedsdl.printer.types import print_type
from fedsdl.printer.values import print_args


def print_schema(schema: GraphQLSchema, options: PrinterOptions | Mapping[str, Any] | None = None) -> str:
    """
    Print a (federated) schema as SDL for publishing to a federation gateway.

    Specified and federation directives, built-in scalars and introspection types
    are left out; entities carry their `@key` directives and fields their
    `@external`, `@provides` and `@requires` directives.

    Args:
        schema: The schema to print
        options: Printer options, e.g. `{"commentDescriptions": True}`

    Returns:
        str: The SDL, ending with a single newline
    """
    return print_filtered_schema(schema, STANDARD_FILTERS, resolve_options(options))


def print_introspection_schema(
    schema: GraphQLSchema, options: PrinterOptions | Mapping[str, Any] | None = None
) -> str:
    """Print only the specified directives and the introspection types of a schema."""
    return print_filtered_schema(schema, INTROSPECTION_FILTERS, resolve_options(options))


def print_filtered_schema(schema: GraphQLSchema, filters: SchemaFilters, options: PrinterOptions) -> str:
    directives = filter_directives(schema, filters.directive_filter)
    types = filter_types(schema, filters.type_filter)

    printed_directives = [print_directive(directive, options) for directive in directives]
    printed_types = [printed for printed in (print_type(type_, options) for type_ in types) if printed]
    log.debug(f"Printed {len(printed_directives)} directives and {len(printed_types)} of {len(types)} types")

    return "\n\n".join(printed for printed in [*printed_directives, *printed_types] if printed) + "\n"


def print_directive(directive: GraphQLDirective, options: PrinterOptions | Mapping[str, Any] | None = None) -> str:
    printer_options = resolve_options(options)
    repeatable = " repeatable" if directive.is_repeatable else ""
    locations = " | ".join(location.name for location in directive.locations)

    return (
        print_description(printer_options, directive)
        + f"directive @{directive.name}{print_args(printer_options, directive.args)}{repeatable} on {locations}"
    )
