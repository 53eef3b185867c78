"""Apollo Federation (v1) types, directives and key-field handling."""

from .key_fields import KeyField, parse_key_fields, print_key_fields, to_key_fields
from .types import EntityObjectType, EntityRefObjectType, federated_field

__all__ = [
    "EntityObjectType",
    "EntityRefObjectType",
    "KeyField",
    "federated_field",
    "parse_key_fields",
    "print_key_fields",
    "to_key_fields",
]
