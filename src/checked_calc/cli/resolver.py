"""Turn command-line tokens into a validated OperationRequest."""
import argparse
import re
from typing import NoReturn, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from checked_calc.common.errors import (
    DomainError,
    HelpRequested,
    MalformedArgumentError,
    MissingArgumentError,
    UnexpectedArgumentError,
    UnknownOperationError,
)
from checked_calc.common.logger import logger
from checked_calc.common.models import INT64_MAX, INT64_MIN, Operation, OperationRequest


PROG: str = "checked-calc"

# Optional sign followed by ASCII digits, nothing else
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Significant digits of the widest 64-bit value
_MAX_DIGITS: int = len(str(INT64_MIN)) - 1


class _RaisingParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing and exiting."""

    def error(self, message: str) -> NoReturn:
        raise MalformedArgumentError(message)


class _HelpAction(argparse.Action):
    """Stop parsing as soon as -h/--help is seen."""

    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS, **kwargs):
        super().__init__(option_strings=option_strings, dest=dest, default=default, nargs=0, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None) -> NoReturn:
        raise HelpRequested()


class ArgumentResolver(BaseModel):
    """
    Validate raw CLI input into an OperationRequest before any arithmetic runs.

    Steps, in order:
        1. Tokenize the -o, -a, -b and -h flags
        2. Resolve the operation name against the operation table
        3. Parse the operands as base-10 signed 64-bit integers
        4. Check the operand count against the operation
        5. Check the operation domain (pow exponent, fact operand)

    Steps 1 to 4 raise UsageError subclasses, step 5 raises DomainError.
    Help short-circuits everything by raising HelpRequested.
    """

    model_config = ConfigDict(frozen=True)

    prog: str = Field(default=PROG, description="Program name used as error context")

    def build_parser(self) -> argparse.ArgumentParser:
        """
        Build the flag tokenizer.

        Abbreviated long flags are rejected and values are kept as raw strings,
        integer parsing happens in :meth:`parse_integer`.

        :return: Configured parser
        :rtype: argparse.ArgumentParser
        """
        parser = _RaisingParser(prog=self.prog, add_help=False, allow_abbrev=False)
        parser.add_argument("-o", "--op", dest="op", metavar="<op>")
        parser.add_argument("-a", "--a", dest="a", metavar="<int>")
        parser.add_argument("-b", "--b", dest="b", metavar="<int>")
        parser.add_argument("-h", "--help", action=_HelpAction)
        return parser

    @staticmethod
    def parse_integer(flag: str, text: str, context: Optional[str] = None) -> int:
        """
        Parse an operand as a base-10 signed 64-bit integer.

        :param str flag: Flag the value came from, for the error message
        :param str text: Raw value
        :param Optional[str] context: Error context

        :return: Parsed integer
        :rtype: int
        :raises MalformedArgumentError: On trailing characters, non-digits or out of range values
        """
        if _INTEGER_RE.fullmatch(text) is None:
            raise MalformedArgumentError(f"invalid integer for {flag}: '{text}'", context=context)
        # int() refuses very long strings, leading zeros included
        digits: str = text.lstrip("+-").lstrip("0") or "0"
        if len(digits) > _MAX_DIGITS:
            raise MalformedArgumentError(f"invalid integer for {flag}: '{text}'", context=context)
        value = -int(digits) if text.startswith("-") else int(digits)
        if not INT64_MIN <= value <= INT64_MAX:
            raise MalformedArgumentError(f"invalid integer for {flag}: '{text}'", context=context)
        return value

    def resolve(self, tokens: Sequence[str]) -> OperationRequest:
        """
        Resolve command-line tokens into a request.

        :param Sequence[str] tokens: Arguments without the program name

        :return: Validated request
        :rtype: OperationRequest
        :raises HelpRequested: If -h/--help was given
        :raises UsageError: On malformed input, unknown operation or wrong operand count
        :raises DomainError: On a negative pow exponent or fact operand
        """
        try:
            args = self.build_parser().parse_args(list(tokens))
        except MalformedArgumentError as exc:
            exc.context = self.prog
            raise

        op: Optional[Operation] = None
        context: str = self.prog
        if args.op is not None:
            op = Operation.lookup(args.op)
            if op is None:
                raise UnknownOperationError(f"unknown operation '{args.op}'", context=self.prog)
            context = op.display_name

        a: Optional[int] = None if args.a is None else self.parse_integer("-a", args.a, context)
        b: Optional[int] = None if args.b is None else self.parse_integer("-b", args.b, context)

        if op is None or a is None:
            raise MissingArgumentError("missing -o or -a", context=context)
        if op.needs_b and b is None:
            raise MissingArgumentError("missing -b for this operation", context=context)
        if not op.needs_b and b is not None:
            raise UnexpectedArgumentError("unexpected -b for this operation", context=context)

        if op is Operation.POW and b < 0:
            raise DomainError("domain error (b must be >= 0)", context=context)
        if op is Operation.FACT and a < 0:
            raise DomainError("domain error (a must be >= 0)", context=context)

        logger.debug(f"Resolved request: op={op.display_name} a={a} b={b}")
        return OperationRequest(op=op, a=a, b=b)
