"""Errors raised while tokenizing, parsing or evaluating an expression."""
from typing import Optional


class ExpressionError(ValueError):
    """
    Base class of every pipeline failure.

    ``str(exc)`` is the user-visible message printed by the command line
    entry point after ``Error: ``.
    """

    message: str = "Invalid expression!"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.message)


class LexicalError(ExpressionError):
    """An input character is neither a digit, whitespace, an operator nor a parenthesis."""

    message = "Unknown operator!"

    def __init__(self, char: str, position: int) -> None:
        super().__init__()
        self.char = char
        self.position = position


class IntegerOverflowError(ExpressionError):
    """A constant or an intermediate result does not fit the signed integer range."""

    message = "Out of bounds!"


class MissingOperandError(ExpressionError):
    """An operator, a parenthesis group or the input itself lacks an operand."""

    message = "Expected an operand!"


class UnexpectedOperandError(ExpressionError):
    """Two operands follow each other without an operator in between."""

    message = "Expected an operator!"


class UnmatchedParenError(ExpressionError):
    """A parenthesis has no partner."""

    message = "Unmatched parenthesis!"


class DivisionByZeroError(ExpressionError):
    """The right operand of a division evaluated to zero."""

    message = "Division by zero!"
