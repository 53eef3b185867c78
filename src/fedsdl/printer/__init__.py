"""SDL printing for federated GraphQL schemas."""

from .schema import print_directive, print_introspection_schema, print_schema
from .types import print_type

__all__ = ["print_directive", "print_introspection_schema", "print_schema", "print_type"]
