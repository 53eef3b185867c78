RESERVED_TYPE_ANY = "_Any"
RESERVED_TYPE_ENTITY = "_Entity"
RESERVED_TYPE_SERVICE = "_Service"
RESERVED_TYPE_QUERY = "Query"
RESERVED_TYPE_MUTATION = "Mutation"

RESERVED_FIELD_SERVICE = "_service"
RESERVED_FIELD_ENTITIES = "_entities"
RESERVED_FIELD_SDL = "sdl"
RESERVED_ARGUMENT_REPRESENTATIONS = "representations"

# Keys read from GraphQLField.extensions
FIELD_DIRECTIVE_IS_EXTERNAL = "isExternal"
FIELD_DIRECTIVE_PROVIDES = "provides"
FIELD_DIRECTIVE_REQUIRES = "requires"

DIRECTIVE_KEY = "key"
DIRECTIVE_EXTERNAL = "external"
DIRECTIVE_PROVIDES = "provides"
DIRECTIVE_REQUIRES = "requires"

FEDERATION_DIRECTIVE_NAMES = frozenset(
    {
        DIRECTIVE_KEY,
        DIRECTIVE_EXTERNAL,
        DIRECTIVE_PROVIDES,
        DIRECTIVE_REQUIRES,
    }
)


def is_federation_directive_name(name: str) -> bool:
    return name in FEDERATION_DIRECTIVE_NAMES


def is_root_extension_type(type_name: str) -> bool:
    """Root types a subgraph extends rather than owns."""
    return type_name in {
        RESERVED_TYPE_QUERY,
        RESERVED_TYPE_MUTATION,
    }


def is_reserved_query_field(field_name: str) -> bool:
    return field_name in {
        RESERVED_FIELD_SERVICE,
        RESERVED_FIELD_ENTITIES,
    }
