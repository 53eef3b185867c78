from collections.abc import Mapping
from typing import Any, cast

from graphql import (
    GraphQLEnumType,
    GraphQLField,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLUnionType,
    is_enum_type,
    is_input_object_type,
    is_interface_type,
    is_object_type,
    is_scalar_type,
    is_union_type,
)
from graphql.pyutils import inspect

from fedsdl import log
from fedsdl.errors import ErrorMessages, UnknownTypeError
from fedsdl.federation.key_fields import print_key_fields
from fedsdl.federation.names import (
    FIELD_DIRECTIVE_IS_EXTERNAL,
    FIELD_DIRECTIVE_PROVIDES,
    FIELD_DIRECTIVE_REQUIRES,
    RESERVED_TYPE_ANY,
    RESERVED_TYPE_ENTITY,
    RESERVED_TYPE_QUERY,
    RESERVED_TYPE_SERVICE,
    is_reserved_query_field,
    is_root_extension_type,
)
from fedsdl.federation.types import EntityObjectType, is_entity_ref_type, is_entity_type
from fedsdl.options import PrinterOptions, resolve_options
from fedsdl.printer.description import print_description
from fedsdl.printer.values import print_args, print_deprecated, print_input_value


def print_type(type_: GraphQLNamedType, options: PrinterOptions | Mapping[str, Any] | None = None) -> str:
    """
    Print a single named type as SDL.

    Federation machinery (`_Any`, `_Service`, `_Entity`) is printed as an empty
    string, as are object types without printable fields.

    Args:
        type_: The type to print
        options: Printer options

    Returns:
        str: The SDL fragment, possibly empty

    Raises:
        UnknownTypeError: If `type_` is not a GraphQL named type
    """
    printer_options = resolve_options(options)

    if is_scalar_type(type_):
        if type_.name == RESERVED_TYPE_ANY:
            log.debug(f"Skipping federation scalar {type_.name}")
            return ""
        return print_scalar(cast(GraphQLScalarType, type_), printer_options)

    if is_entity_type(type_):
        return print_entity_object(cast(EntityObjectType, type_), printer_options)

    if is_object_type(type_):
        if type_.name == RESERVED_TYPE_SERVICE:
            log.debug(f"Skipping federation type {type_.name}")
            return ""
        return print_object(cast(GraphQLObjectType, type_), printer_options)

    if is_interface_type(type_):
        return print_interface(cast(GraphQLInterfaceType, type_), printer_options)

    if is_union_type(type_):
        if type_.name == RESERVED_TYPE_ENTITY:
            log.debug(f"Skipping federation union {type_.name}")
            return ""
        return print_union(cast(GraphQLUnionType, type_), printer_options)

    if is_enum_type(type_):
        return print_enum(cast(GraphQLEnumType, type_), printer_options)

    if is_input_object_type(type_):
        return print_input_object(cast(GraphQLInputObjectType, type_), printer_options)

    raise UnknownTypeError(f"{ErrorMessages.UNKNOWN_TYPE}: {inspect(type_)}.")


def print_scalar(type_: GraphQLScalarType, options: PrinterOptions) -> str:
    return f"{print_description(options, type_)}scalar {type_.name}"


def print_object(type_: GraphQLObjectType, options: PrinterOptions) -> str:
    if not get_printable_fields(type_):
        log.debug(f"Skipping object type {type_.name} without printable fields")
        return ""

    # Subgraphs extend the gateway's root types
    extends = "extend " if is_root_extension_type(type_.name) else ""

    return (
        print_description(options, type_)
        + f"{extends}type {type_.name}{print_implemented_interfaces(type_)} {{\n"
        + print_fields(options, type_)
        + "\n}"
    )


def print_entity_object(type_: EntityObjectType, options: PrinterOptions) -> str:
    key_directives = "".join(f' @key(fields: "{print_key_fields(key)}")' for key in type_.key_fields)
    extends = "extend " if is_entity_ref_type(type_) else ""

    return (
        print_description(options, type_)
        + f"{extends}type {type_.name}{print_implemented_interfaces(type_)}{key_directives} {{\n"
        + print_fields(options, type_)
        + "\n}"
    )


def print_implemented_interfaces(type_: GraphQLObjectType) -> str:
    if not type_.interfaces:
        return ""
    return " implements " + " & ".join(interface.name for interface in type_.interfaces)


def get_printable_fields(type_: GraphQLObjectType | GraphQLInterfaceType) -> dict[str, GraphQLField]:
    """Fields of the type, without the federation `_service` and `_entities` fields of the query type."""
    if type_.name != RESERVED_TYPE_QUERY:
        return dict(type_.fields)

    return {name: field for name, field in type_.fields.items() if not is_reserved_query_field(name)}


def print_fields(options: PrinterOptions, type_: GraphQLObjectType | GraphQLInterfaceType) -> str:
    return "\n".join(
        print_description(options, field, "  ", i == 0)
        + f"  {name}"
        + print_args(options, field.args, "  ")
        + f": {field.type}"
        + print_deprecated(field.deprecation_reason)
        + print_field_federated_directives(field)
        for i, (name, field) in enumerate(get_printable_fields(type_).items())
    )


def print_field_federated_directives(field: GraphQLField) -> str:
    """Print the @external, @provides and @requires directives of a field, each preceded by a space."""
    extensions = field.extensions or {}
    directives = []

    if extensions.get(FIELD_DIRECTIVE_IS_EXTERNAL) is True:
        directives.append("@external")

    provides = extensions.get(FIELD_DIRECTIVE_PROVIDES)
    if provides is not None:
        directives.append(f'@provides(fields: "{print_key_fields(provides)}")')

    requires = extensions.get(FIELD_DIRECTIVE_REQUIRES)
    if requires is not None:
        directives.append(f'@requires(fields: "{print_key_fields(requires)}")')

    return "".join(f" {directive}" for directive in directives)


def print_interface(type_: GraphQLInterfaceType, options: PrinterOptions) -> str:
    return print_description(options, type_) + f"interface {type_.name} {{\n{print_fields(options, type_)}\n}}"


def print_union(type_: GraphQLUnionType, options: PrinterOptions) -> str:
    possible_types = " | ".join(possible_type.name for possible_type in type_.types)
    return print_description(options, type_) + f"union {type_.name} = {possible_types}"


def print_enum(type_: GraphQLEnumType, options: PrinterOptions) -> str:
    values = "\n".join(
        print_description(options, value, "  ", i == 0) + f"  {name}" + print_deprecated(value.deprecation_reason)
        for i, (name, value) in enumerate(type_.values.items())
    )
    return print_description(options, type_) + f"enum {type_.name} {{\n{values}\n}}"


def print_input_object(type_: GraphQLInputObjectType, options: PrinterOptions) -> str:
    fields = "\n".join(
        print_description(options, field, "  ", i == 0) + "  " + print_input_value(name, field)
        for i, (name, field) in enumerate(type_.fields.items())
    )
    return print_description(options, type_) + f"input {type_.name} {{\n{fields}\n}}"
