"""Description rendering as GraphQL block strings or `#` comments."""

import re
from typing import Any

from fedsdl.options import PrinterOptions

MAX_LINE_LENGTH = 120
LINE_BREAK_TOLERANCE = 5
MIN_SUBLINE_LENGTH = 15
SUBLINE_MARGIN = 40
INLINE_DESCRIPTION_MAX_LENGTH = 70
BLOCK_QUOTE = '"""'


def print_description(
    options: PrinterOptions,
    definition: Any,
    indentation: str = "",
    first_in_block: bool = True,
) -> str:
    """
    Print the description of a type, field, argument, enum value or directive.

    Args:
        options: Printer options; `comment_descriptions` selects `#` comments
        definition: Anything with a `description` attribute
        indentation: Indentation of the described element
        first_in_block: Whether the element opens its enclosing block

    Returns:
        str: The description followed by a newline, or an empty string if there is none
    """
    description = getattr(definition, "description", None)
    if not description:
        return ""

    lines = description_lines(description, MAX_LINE_LENGTH - len(indentation))

    if options.comment_descriptions:
        return print_description_with_comments(lines, indentation, first_in_block)

    opening = f"{indentation}{BLOCK_QUOTE}"
    if indentation and not first_in_block:
        opening = f"\n{opening}"

    # A short single line fits between the quotes
    if len(lines) == 1 and len(lines[0]) < INLINE_DESCRIPTION_MAX_LENGTH and not lines[0].endswith('"'):
        return f"{opening}{escape_quote(lines[0])}{BLOCK_QUOTE}\n"

    # A leading space on the first line must stay right after the opening quotes
    has_leading_space = bool(lines) and lines[0][:1] in (" ", "\t")

    parts = [opening]
    if not has_leading_space:
        parts.append("\n")

    for i, line in enumerate(lines):
        if i != 0 or not has_leading_space:
            parts.append(indentation)
        parts.append(f"{escape_quote(line)}\n")

    parts.append(f"{indentation}{BLOCK_QUOTE}\n")
    return "".join(parts)


def print_description_with_comments(lines: list[str], indentation: str, first_in_block: bool) -> str:
    parts = ["\n"] if indentation and not first_in_block else []

    for line in lines:
        if line:
            parts.append(f"{indentation}# {line}\n")
        else:
            parts.append(f"{indentation}#\n")

    return "".join(parts)


def description_lines(description: str, max_len: int) -> list[str]:
    """Split a description into lines, wrapping overly long ones at word boundaries."""
    lines: list[str] = []
    for raw_line in description.split("\n"):
        if raw_line:
            lines.extend(break_line(raw_line, max_len))
        else:
            lines.append(raw_line)

    return lines


def break_line(line: str, max_len: int) -> list[str]:
    """
    Break a line longer than `max_len + 5` into sublines ending at spaces.

    Each subline is 15 to `max_len - 40` characters long before being stripped.
    Text left over between or after the matches (a trailing word too short to
    form a subline of its own) stays attached to the preceding subline.
    """
    if len(line) < max_len + LINE_BREAK_TOLERANCE:
        return [line]

    max_subline_length = max(MIN_SUBLINE_LENGTH, max_len - SUBLINE_MARGIN)
    # Odd indexes hold the matched sublines, even indexes the text around them
    parts = re.split(rf"((?: |^).{{{MIN_SUBLINE_LENGTH},{max_subline_length}}}(?= |$))", line)

    sublines: list[str] = []
    for i, part in enumerate(parts):
        if i % 2 == 1 or not sublines:
            sublines.append(part)
        else:
            sublines[-1] += part

    return [subline.strip() for subline in sublines if subline.strip()]


def escape_quote(line: str) -> str:
    return line.replace(BLOCK_QUOTE, f"\\{BLOCK_QUOTE}")
