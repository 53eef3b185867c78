from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from fedsdl.errors import ErrorMessages, InvalidOptionsError


class PrinterOptions(BaseModel):
    """Options controlling how SDL is printed.

    Args:
        comment_descriptions: Render descriptions as ``#`` comments instead of block strings.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    comment_descriptions: bool = Field(default=False, alias="commentDescriptions")


DEFAULT_OPTIONS = PrinterOptions()


def resolve_options(options: PrinterOptions | Mapping[str, Any] | None) -> PrinterOptions:
    """Coerce ``None``, a mapping or a ``PrinterOptions`` instance into ``PrinterOptions``.

    Raises:
        InvalidOptionsError: If a mapping holds unknown keys or values of the wrong type.
    """
    if options is None:
        return DEFAULT_OPTIONS
    if isinstance(options, PrinterOptions):
        return options

    try:
        return PrinterOptions.model_validate(dict(options))
    except ValidationError as e:
        raise InvalidOptionsError(f"{ErrorMessages.INVALID_OPTIONS}: {e}") from e
