"""
Command-line entry point.

Pipeline:
- Resolve the command-line tokens into a validated request
- Evaluate the request with checked arithmetic
- Print the result or a single error line and return the exit code

This module is the only place that turns errors into output and exit codes.
"""
import sys
from typing import Optional, Sequence

from checked_calc.cli import exit_codes
from checked_calc.cli.presenter import present_result, print_error, print_usage
from checked_calc.cli.resolver import PROG, ArgumentResolver
from checked_calc.common.errors import CalcError, HelpRequested
from checked_calc.common.logger import logger
from checked_calc.common.operations import evaluate


def run(argv: Optional[Sequence[str]] = None, prog: str = PROG) -> int:
    """
    Run one invocation of the calculator.

    :param Optional[Sequence[str]] argv: Arguments without the program name, defaults to ``sys.argv[1:]``
    :param str prog: Program name for the usage text and generic errors

    :return: Process exit code
    :rtype: int
    """
    tokens = list(sys.argv[1:] if argv is None else argv)
    resolver = ArgumentResolver(prog=prog)

    try:
        request = resolver.resolve(tokens)
    except HelpRequested:
        print_usage(prog)
        return exit_codes.SUCCESS
    except CalcError as exc:
        logger.info(f"Rejected input ({exc.kind.value}): {exc.message}")
        print_error(exc.context or prog, exc.message)
        if exc.kind.is_usage:
            print_usage(prog, to_stderr=True)
            return exit_codes.USAGE_ERROR
        return exit_codes.MATH_ERROR

    result = evaluate(request)
    return present_result(result, request.op.display_name)


def main() -> None:
    """Console script entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
