"""Render results, errors and the usage text."""
import sys

from checked_calc.cli import exit_codes
from checked_calc.common.logger import logger
from checked_calc.common.models import ErrorKind, Operation, OperationResult


# Message per engine error kind
MATH_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.DIVIDE_BY_ZERO: "division by zero",
    ErrorKind.OVERFLOW: "overflow",
    ErrorKind.DOMAIN_INVALID: "domain error",
}


def usage_text(prog: str) -> str:
    """
    Build the help text listing operations, options and examples.

    :param str prog: Program name shown in the synopsis

    :return: Multi-line usage text ending with a newline
    :rtype: str
    """
    operations = "\n".join(f"  {op.display_name:<5} {op.usage}" for op in Operation)
    return (
        "Usage:\n"
        f"  {prog} -o <op> -a <int> [-b <int>]\n"
        "\n"
        "Operations:\n"
        f"{operations}\n"
        "\n"
        "Options:\n"
        "  -o, --op     operation name\n"
        "  -a, --a      first integer\n"
        "  -b, --b      second integer (required for add/sub/mul/div/pow)\n"
        "  -h, --help   show this help\n"
        "\n"
        "Examples:\n"
        f"  {prog} -o add  -a 2  -b 3\n"
        f"  {prog} -o fact -a 5\n"
    )


def error_line(context: str, message: str) -> str:
    """Format the single user-facing error line."""
    return f"Error: {context}: {message}"


def print_usage(prog: str, to_stderr: bool = False) -> None:
    """Write the usage text to stdout, or stderr after a usage error."""
    stream = sys.stderr if to_stderr else sys.stdout
    stream.write(usage_text(prog))


def print_error(context: str, message: str) -> None:
    """Write one error line to stderr."""
    print(error_line(context, message), file=sys.stderr)


def present_result(result: OperationResult, context: str) -> int:
    """
    Print a computed result and return the matching exit code.

    Success prints the value alone on stdout. Failure prints one error line on
    stderr and nothing on stdout.

    :param OperationResult result: Engine output
    :param str context: Operation name used as error context

    :return: Process exit code
    :rtype: int
    """
    if not result.is_ok:
        print_error(context, MATH_MESSAGES.get(result.error, "math error"))
        return exit_codes.MATH_ERROR

    logger.debug(f"Printing {result.kind.value} result for {context}")
    # Python ints carry their sign, so signed and unsigned values format alike
    print(f"{result.value:d}")
    return exit_codes.SUCCESS
