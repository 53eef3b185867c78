from graphql import (
    DEFAULT_DEPRECATION_REASON,
    GraphQLArgument,
    GraphQLInputField,
    StringValueNode,
    Undefined,
    ast_from_value,
    print_ast,
)

from fedsdl.options import PrinterOptions
from fedsdl.printer.description import print_description


def print_input_value(name: str, arg: GraphQLArgument | GraphQLInputField) -> str:
    """Print an argument or input field as `name: Type`, with ` = default` when a default exists."""
    arg_decl = f"{name}: {arg.type}"

    if arg.default_value is not Undefined:
        default_ast = ast_from_value(arg.default_value, arg.type)
        if default_ast:
            arg_decl += f" = {print_ast(default_ast)}"

    return arg_decl + print_deprecated(arg.deprecation_reason)


def print_args(options: PrinterOptions, args: dict[str, GraphQLArgument], indentation: str = "") -> str:
    """
    Print an argument list.

    Arguments without descriptions share one line; otherwise each argument gets
    its own line, preceded by its description and indented one level deeper.
    """
    if not args:
        return ""

    if all(not arg.description for arg in args.values()):
        return f"({', '.join(print_input_value(name, arg) for name, arg in args.items())})"

    arg_indentation = f"  {indentation}"
    printed_args = "\n".join(
        print_description(options, arg, arg_indentation, i == 0) + arg_indentation + print_input_value(name, arg)
        for i, (name, arg) in enumerate(args.items())
    )
    return f"(\n{printed_args}\n{indentation})"


def print_deprecated(reason: str | None) -> str:
    if not reason:
        return ""
    if reason == DEFAULT_DEPRECATION_REASON:
        return " @deprecated"

    return f" @deprecated(reason: {print_ast(StringValueNode(value=reason))})"
