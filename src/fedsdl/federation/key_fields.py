"""Key-field specifications used by @key, @provides and @requires.

See https://www.apollographql.com/docs/federation/v1/entities#compound-primary-keys
"""

import re
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from graphql import FieldNode, GraphQLSyntaxError, OperationDefinitionNode, SelectionSetNode, parse

from fedsdl.errors import ErrorMessages, InvalidKeyFieldsError

FIELD_NAME_PATTERN = re.compile(r"^[_A-Za-z][_0-9A-Za-z]*$")


@dataclass(frozen=True)
class KeyField:
    """A field in a key-field selection, with optional nested selections.

    Args:
        name: The field name
        selections: Nested key fields; empty for a plain (leaf) field
    """

    name: str
    selections: tuple["KeyField", ...] = ()

    @property
    def is_leaf(self) -> bool:
        return not self.selections

    def __str__(self) -> str:
        if self.is_leaf:
            return self.name
        return f"{self.name} {{ {print_key_fields(self.selections)} }}"


KeyFieldSpec = str | KeyField | Sequence[Any] | Mapping[str, Any]


def print_key_fields(key_fields: KeyFieldSpec) -> str:
    """
    Print simple and compound key fields in the `fields: "..."` argument syntax.

    A string is printed verbatim, a mapping entry `name -> nested` is printed as
    `name { nested }` and sequences are flattened. Siblings keep their order.

    Args:
        key_fields: The key-field specification

    Returns:
        str: The printed selection, e.g. `id location { id }`

    Raises:
        InvalidKeyFieldsError: If the specification holds anything else
    """
    return " ".join(_iter_printed_key_fields(key_fields))


def _iter_printed_key_fields(key_fields: Any) -> Iterator[str]:
    if isinstance(key_fields, str):
        yield key_fields
    elif isinstance(key_fields, KeyField):
        yield str(key_fields)
    elif isinstance(key_fields, Mapping):
        for name, nested in key_fields.items():
            if not isinstance(name, str):
                raise InvalidKeyFieldsError(f"{ErrorMessages.INVALID_KEY_FIELDS}: field name {name!r} is not a string")
            nested_fields = print_key_fields(nested)
            if not nested_fields:
                raise InvalidKeyFieldsError(f"{ErrorMessages.INVALID_KEY_FIELDS}: '{name}' has no nested fields")
            yield f"{name} {{ {nested_fields} }}"
    elif isinstance(key_fields, Sequence):
        for key_field in key_fields:
            yield from _iter_printed_key_fields(key_field)
    else:
        raise InvalidKeyFieldsError(f"{ErrorMessages.INVALID_KEY_FIELDS}: {key_fields!r}")


def to_key_fields(key_fields: KeyFieldSpec) -> tuple[KeyField, ...]:
    """
    Normalize a raw key-field specification into `KeyField` values.

    Strings holding a single field name become a leaf; any other string is parsed
    as a field set with `parse_key_fields`.

    Raises:
        InvalidKeyFieldsError: If the specification is malformed
    """
    if isinstance(key_fields, KeyField):
        return (key_fields,)
    if isinstance(key_fields, str):
        if FIELD_NAME_PATTERN.match(key_fields):
            return (KeyField(key_fields),)
        return parse_key_fields(key_fields)
    if isinstance(key_fields, Mapping):
        result = []
        for name, nested in key_fields.items():
            if not isinstance(name, str):
                raise InvalidKeyFieldsError(f"{ErrorMessages.INVALID_KEY_FIELDS}: field name {name!r} is not a string")
            selections = to_key_fields(nested)
            if not selections:
                raise InvalidKeyFieldsError(f"{ErrorMessages.INVALID_KEY_FIELDS}: '{name}' has no nested fields")
            result.append(KeyField(name, selections))
        return tuple(result)
    if isinstance(key_fields, Sequence):
        return tuple(key_field for item in key_fields for key_field in to_key_fields(item))

    raise InvalidKeyFieldsError(f"{ErrorMessages.INVALID_KEY_FIELDS}: {key_fields!r}")


def parse_key_fields(source: str) -> tuple[KeyField, ...]:
    """
    Parse a federation field set such as `id organization { id }` into `KeyField` values.

    Args:
        source: The field set, without surrounding braces

    Returns:
        tuple[KeyField, ...]: The parsed key fields in declaration order

    Raises:
        InvalidKeyFieldsError: If the field set is not a plain selection of fields
    """
    try:
        document = parse(f"{{ {source} }}", no_location=True)
    except GraphQLSyntaxError as e:
        raise InvalidKeyFieldsError(f"{ErrorMessages.INVALID_KEY_FIELDS_SYNTAX} {source!r}: {e.message}") from e

    if len(document.definitions) != 1 or not isinstance(document.definitions[0], OperationDefinitionNode):
        raise InvalidKeyFieldsError(f"{ErrorMessages.INVALID_KEY_FIELDS_SYNTAX} {source!r}: not a single field set")

    return _key_fields_from_selection_set(document.definitions[0].selection_set, source)


def _key_fields_from_selection_set(selection_set: SelectionSetNode, source: str) -> tuple[KeyField, ...]:
    key_fields = []
    for selection in selection_set.selections:
        if not isinstance(selection, FieldNode) or selection.alias or selection.arguments or selection.directives:
            raise InvalidKeyFieldsError(
                f"{ErrorMessages.INVALID_KEY_FIELDS_SYNTAX} {source!r}: only plain field selections are allowed"
            )

        nested: tuple[KeyField, ...] = ()
        if selection.selection_set:
            nested = _key_fields_from_selection_set(selection.selection_set, source)
        key_fields.append(KeyField(selection.name.value, nested))

    return tuple(key_fields)
