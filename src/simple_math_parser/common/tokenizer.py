"""Split raw expression text into tokens."""
from typing import Dict, List

from simple_math_parser.common.errors import LexicalError
from simple_math_parser.common.logger import logger
from simple_math_parser.common.models import (
    ConstantToken,
    OperatorKind,
    OperatorToken,
    ParenCloseToken,
    ParenOpenToken,
    Token,
)

DIGITS = "0123456789"

# Single-character tokens
SYMBOLS: Dict[str, Token] = {
    "+": OperatorToken(kind=OperatorKind.ADD),
    "-": OperatorToken(kind=OperatorKind.SUB),
    "*": OperatorToken(kind=OperatorKind.MUL),
    "/": OperatorToken(kind=OperatorKind.DIV),
    "(": ParenOpenToken(),
    ")": ParenCloseToken(),
}


class Tokenizer:
    """
    Convert an expression string into an ordered list of tokens.

    Rules:
        - A maximal run of decimal digits becomes one constant
        - Whitespace is skipped
        - ``+ - * / ( )`` map to their tokens
        - Anything else aborts tokenization

    Unlike a whitespace split, tokens need no separators: ``"12+3"`` yields
    three tokens.
    """

    @staticmethod
    def tokenize(expr: str) -> List[Token]:
        """
        Split an arithmetic expression into tokens.

        :param str expr: Arithmetic expression as a string

        :return: List of tokens, in input order
        :rtype: List[Token]
        :raises LexicalError: If a character is not part of the grammar
        """
        tokens: List[Token] = []
        pos: int = 0

        while pos < len(expr):
            char = expr[pos]

            if char in DIGITS:
                # Fold the whole digit run into a single value
                value: int = 0
                while pos < len(expr) and expr[pos] in DIGITS:
                    value = value * 10 + DIGITS.index(expr[pos])
                    pos += 1
                tokens.append(ConstantToken(value=value))
                continue

            if not char.isspace():
                if char not in SYMBOLS:
                    logger.debug("Unknown character %r at position %s in %r", char, pos, expr)
                    raise LexicalError(char, pos)
                tokens.append(SYMBOLS[char])

            pos += 1

        logger.debug("Tokenized %r into %s tokens", expr, len(tokens))
        return tokens
