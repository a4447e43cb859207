"""
Command line entry point.

Usage::

    simple-math-parser "<expression>"

This script:
- Validates that exactly one expression was given
- Runs the calculator on it
- Prints the result, or ``Error: <message>`` and exits with status 1
"""

import argparse
import sys
from typing import List, NoReturn, Optional

from pydantic import BaseModel, Field, ValidationError

from simple_math_parser.calculator import Calculator
from simple_math_parser.common.config import EvaluatorConfig
from simple_math_parser.common.logger import logger

USAGE = "usage: simple-math-parser <expression>"


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    expression : str
        Arithmetic expression to evaluate.
    """

    expression: str = Field(..., description="Arithmetic expression to evaluate")


class UsageArgumentParser(argparse.ArgumentParser):
    """Argument parser that prints the usage line to standard output and exits cleanly on misuse."""

    def error(self, message: str) -> NoReturn:
        logger.debug(f"Invalid command line: {message}")
        print(USAGE)
        sys.exit(0)


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    Every argument is positional, so an expression starting with ``-`` is
    still read as an expression.

    :param argv: Arguments without the program name, defaults to ``sys.argv[1:]``

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = UsageArgumentParser(prog="simple-math-parser", usage="%(prog)s <expression>", add_help=False)
    parser.add_argument("expression", help="Arithmetic expression to evaluate")

    args = sys.argv[1:] if argv is None else argv
    namespace = parser.parse_args(["--", *args])
    return CliArgs(expression=namespace.expression)


def main(argv: Optional[List[str]] = None) -> None:
    """
    Evaluate the expression given on the command line and print the outcome.

    :param argv: Arguments without the program name, defaults to ``sys.argv[1:]``
    """
    cli_args = parse_args(argv)

    try:
        settings = EvaluatorConfig.from_env()
    except ValidationError as exc:
        print(f"Error: invalid configuration: {exc}")
        sys.exit(1)

    outcome = Calculator(settings=settings).run(cli_args.expression)

    if not outcome.ok:
        print(f"Error: {outcome.error}")
        sys.exit(1)

    print(outcome.result)


if __name__ == "__main__":
    main()
