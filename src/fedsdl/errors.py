class FedSDLError(Exception):
    """Base class for errors raised while printing a schema."""


class UnknownTypeError(FedSDLError, TypeError):
    """Raised when the type printer receives a value that is not a supported GraphQL named type.

    Schemas built with graphql-core only ever hold the supported variants, so this
    signals a broken caller contract rather than bad user input.
    """


class InvalidKeyFieldsError(FedSDLError, ValueError):
    """Raised when a key-field specification is neither a field name, a sequence nor a mapping."""


class InvalidOptionsError(FedSDLError, ValueError):
    """Raised when printer options fail validation."""


class ErrorMessages:
    """Standard error messages for fedsdl exceptions."""

    UNKNOWN_TYPE = "Unknown type"
    INVALID_KEY_FIELDS = "Invalid key fields config"
    INVALID_KEY_FIELDS_SYNTAX = "Cannot parse key fields"
    INVALID_OPTIONS = "Invalid printer options"
