from collections.abc import Sequence
from typing import Any

from graphql import (
    DirectiveLocation,
    GraphQLArgument,
    GraphQLDirective,
    GraphQLField,
    GraphQLFieldResolver,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLOutputType,
    GraphQLScalarType,
    GraphQLString,
)

from fedsdl.errors import ErrorMessages, InvalidKeyFieldsError
from fedsdl.federation.key_fields import KeyField, KeyFieldSpec, to_key_fields
from fedsdl.federation.names import (
    DIRECTIVE_EXTERNAL,
    DIRECTIVE_KEY,
    DIRECTIVE_PROVIDES,
    DIRECTIVE_REQUIRES,
    FIELD_DIRECTIVE_IS_EXTERNAL,
    FIELD_DIRECTIVE_PROVIDES,
    FIELD_DIRECTIVE_REQUIRES,
    RESERVED_FIELD_SDL,
    RESERVED_TYPE_ANY,
    RESERVED_TYPE_SERVICE,
)


class EntityObjectType(GraphQLObjectType):
    """
    Object type resolvable across federated services through one or more keys.

    Each entry of `key_fields` becomes its own `@key(fields: "...")` directive. An
    entry is a field name, a field set string such as `id organization { id }`, a
    `KeyField`, or a sequence/mapping of those.

    Args:
        name: The type name
        fields: The fields (or a thunk returning them), as for `GraphQLObjectType`
        key_fields: The entity keys
        **kwargs: Remaining `GraphQLObjectType` arguments
    """

    key_fields: tuple[tuple[KeyField, ...], ...]

    def __init__(self, name: str, fields: Any, key_fields: KeyFieldSpec | Sequence[KeyFieldSpec], **kwargs: Any):
        super().__init__(name, fields, **kwargs)

        if isinstance(key_fields, str) or not isinstance(key_fields, Sequence):
            key_fields = [key_fields]

        keys = tuple(to_key_fields(key) for key in key_fields)
        if not keys or not all(keys):
            raise InvalidKeyFieldsError(f"{ErrorMessages.INVALID_KEY_FIELDS}: entity '{name}' must declare a key")

        self.key_fields = keys

    def to_kwargs(self) -> dict[str, Any]:  # type: ignore[override]
        return {**super().to_kwargs(), "key_fields": self.key_fields}


class EntityRefObjectType(EntityObjectType):
    """Entity owned by another service and extended (`extend type`) by this one."""


def is_entity_type(type_: Any) -> bool:
    return isinstance(type_, EntityObjectType)


def is_entity_ref_type(type_: Any) -> bool:
    return isinstance(type_, EntityRefObjectType)


def federated_field(
    type_: GraphQLOutputType,
    args: dict[str, GraphQLArgument] | None = None,
    resolve: GraphQLFieldResolver | None = None,
    description: str | None = None,
    deprecation_reason: str | None = None,
    external: bool = False,
    provides: KeyFieldSpec | None = None,
    requires: KeyFieldSpec | None = None,
    extensions: dict[str, Any] | None = None,
) -> GraphQLField:
    """Build a `GraphQLField` carrying @external/@provides/@requires metadata in its extensions."""
    field_extensions = dict(extensions or {})
    if external:
        field_extensions[FIELD_DIRECTIVE_IS_EXTERNAL] = True
    if provides is not None:
        field_extensions[FIELD_DIRECTIVE_PROVIDES] = provides
    if requires is not None:
        field_extensions[FIELD_DIRECTIVE_REQUIRES] = requires

    return GraphQLField(
        type_,
        args=args,
        resolve=resolve,
        description=description,
        deprecation_reason=deprecation_reason,
        extensions=field_extensions,
    )


def _fields_argument() -> dict[str, GraphQLArgument]:
    return {"fields": GraphQLArgument(GraphQLNonNull(GraphQLString))}


KEY_DIRECTIVE = GraphQLDirective(
    name=DIRECTIVE_KEY,
    locations=[DirectiveLocation.OBJECT, DirectiveLocation.INTERFACE],
    args=_fields_argument(),
    is_repeatable=True,
)

EXTERNAL_DIRECTIVE = GraphQLDirective(
    name=DIRECTIVE_EXTERNAL,
    locations=[DirectiveLocation.FIELD_DEFINITION],
)

REQUIRES_DIRECTIVE = GraphQLDirective(
    name=DIRECTIVE_REQUIRES,
    locations=[DirectiveLocation.FIELD_DEFINITION],
    args=_fields_argument(),
)

PROVIDES_DIRECTIVE = GraphQLDirective(
    name=DIRECTIVE_PROVIDES,
    locations=[DirectiveLocation.FIELD_DEFINITION],
    args=_fields_argument(),
)

FEDERATION_DIRECTIVES: tuple[GraphQLDirective, ...] = (
    KEY_DIRECTIVE,
    EXTERNAL_DIRECTIVE,
    REQUIRES_DIRECTIVE,
    PROVIDES_DIRECTIVE,
)

# Entity representations: a `__typename` plus the key fields
ANY_TYPE = GraphQLScalarType(name=RESERVED_TYPE_ANY)

SERVICE_TYPE = GraphQLObjectType(
    name=RESERVED_TYPE_SERVICE,
    fields={RESERVED_FIELD_SDL: GraphQLField(GraphQLString)},
)
