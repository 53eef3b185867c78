from collections.abc import Callable
from typing import NamedTuple

from graphql import (
    GraphQLDirective,
    GraphQLNamedType,
    GraphQLSchema,
    is_introspection_type,
    is_specified_directive,
    is_specified_scalar_type,
)

from fedsdl.federation.names import is_federation_directive_name

DirectiveFilter = Callable[[GraphQLDirective], bool]
TypeFilter = Callable[[GraphQLNamedType], bool]


class SchemaFilters(NamedTuple):
    """Predicates selecting which directives and types of a schema get printed."""

    directive_filter: DirectiveFilter
    type_filter: TypeFilter


def is_federation_directive(directive: GraphQLDirective) -> bool:
    return is_federation_directive_name(directive.name)


def is_built_in_type(type_: GraphQLNamedType) -> bool:
    return is_specified_scalar_type(type_) or is_introspection_type(type_)


def is_printable_directive(directive: GraphQLDirective) -> bool:
    return not is_specified_directive(directive) and not is_federation_directive(directive)


def is_printable_type(type_: GraphQLNamedType) -> bool:
    return not is_built_in_type(type_)


STANDARD_FILTERS = SchemaFilters(directive_filter=is_printable_directive, type_filter=is_printable_type)
INTROSPECTION_FILTERS = SchemaFilters(directive_filter=is_specified_directive, type_filter=is_introspection_type)


def filter_directives(schema: GraphQLSchema, directive_filter: DirectiveFilter) -> list[GraphQLDirective]:
    """Directives of the schema accepted by the filter, in schema order."""
    return [directive for directive in schema.directives if directive_filter(directive)]


def filter_types(schema: GraphQLSchema, type_filter: TypeFilter) -> list[GraphQLNamedType]:
    """Named types of the schema accepted by the filter, sorted by name."""
    return [type_ for _, type_ in sorted(schema.type_map.items()) if type_filter(type_)]
