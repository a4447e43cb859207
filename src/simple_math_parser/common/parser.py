"""Build an expression tree from a token list with a single reverse scan."""
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from simple_math_parser.common.config import EvaluatorConfig
from simple_math_parser.common.errors import (
    IntegerOverflowError,
    MissingOperandError,
    UnexpectedOperandError,
    UnmatchedParenError,
)
from simple_math_parser.common.logger import logger
from simple_math_parser.common.models import (
    ConstantExpression,
    ConstantToken,
    Expression,
    OperatorExpression,
    OperatorKind,
    OperatorToken,
    ParenCloseToken,
    Token,
)

LOWEST_PRECEDENCE: int = min(kind.precedence for kind in OperatorKind)
HIGHEST_PRECEDENCE: int = max(kind.precedence for kind in OperatorKind)
LEVELS = range(LOWEST_PRECEDENCE, HIGHEST_PRECEDENCE + 1)


class ReverseCursor:
    """Read position over a token list, moving from the last token to the first."""

    def __init__(self, tokens: List[Token]) -> None:
        self._tokens = tokens
        self._pos = len(tokens) - 1

    def peek(self) -> Optional[Token]:
        """Return the token under the cursor, or None once the start is passed."""
        return self._tokens[self._pos] if self._pos >= 0 else None

    def advance(self) -> Token:
        token = self._tokens[self._pos]
        self._pos -= 1
        return token


class ScanFrame:
    """
    Operands and operators pending in one group: the whole input or one pair of parentheses.

    Each precedence level keeps its chain right to left. Operands enter at
    the tightest level; when a looser operator is read, the tighter chains are
    folded and handed down as a single operand.
    """

    def __init__(self, paren: bool) -> None:
        self.paren = paren
        self.operands: Dict[int, List[Expression]] = {level: [] for level in LEVELS}
        self.operators: Dict[int, List[OperatorKind]] = {level: [] for level in LEVELS}

    def push_operand(self, operand: Expression) -> None:
        self.operands[HIGHEST_PRECEDENCE].append(operand)

    def drop_operand(self) -> Expression:
        return self.operands[HIGHEST_PRECEDENCE].pop()

    def push_operator(self, kind: OperatorKind) -> None:
        self._close_levels_above(kind.precedence)
        self.operators[kind.precedence].append(kind)

    def close(self) -> Expression:
        """Fold every pending chain into the tree of the whole group."""
        self._close_levels_above(LOWEST_PRECEDENCE)
        return self._fold(LOWEST_PRECEDENCE)

    def _close_levels_above(self, precedence: int) -> None:
        for level in range(HIGHEST_PRECEDENCE, precedence, -1):
            self.operands[level - 1].append(self._fold(level))

    def _fold(self, level: int) -> Expression:
        operands = self.operands[level]
        operators = self.operators[level]
        # Both lists run right to left: the last entries are the leftmost
        tree: Expression = operands.pop()
        while operators:
            tree = OperatorExpression(kind=operators.pop(), left=tree, right=operands.pop())
        return tree


class ExpressionParser(BaseModel):
    """
    Build a binary expression tree from tokens, scanning them right to left.

    Algorithm:
        1. Start at the last token, expecting an operand
        2. An operand (a constant or a whole parenthesis group) joins the
           chain of the tightest precedence level
        3. An operator of a looser level ends the tighter chains: they are
           folded into one operand of its own level
        4. The start of the input or a ``(`` ends the current group; all of
           its chains are folded left-associatively into one tree

    Scanning backwards, the operand to the right of an operator is always
    complete by the time the operator is reached, while its left operand is
    still ahead of the scan. A ``)`` therefore opens a parenthesis group and
    the matching ``(`` closes it.

    Examples:
        - ``2+3*4`` is read as ``4``, ``*``, ``3`` (multiplicative chain),
          then ``+``, ``2``: ``(2 + (3 * 4))``
        - ``10-2-3`` collects ``3``, ``2``, ``10`` and folds them into
          ``((10 - 2) - 3)``

    Open groups are kept on an explicit stack of frames, so neither the
    number of operators nor the parenthesis depth is limited by the
    interpreter recursion limit.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    settings: EvaluatorConfig = Field(default_factory=EvaluatorConfig, description="Integer range and operand strictness")

    def parse(self, tokens: List[Token]) -> Expression:
        """
        Parse a full token list into one expression tree.

        :param List[Token] tokens: Tokens in input order

        :return: Root of the expression tree
        :rtype: Expression
        :raises MissingOperandError: If an operator or a group lacks an operand
        :raises UnexpectedOperandError: If two operands are adjacent in strict mode
        :raises UnmatchedParenError: If a parenthesis has no partner
        :raises IntegerOverflowError: If a constant does not fit the integer range
        """
        cursor = ReverseCursor(tokens)
        enclosing: List[ScanFrame] = []
        frame = ScanFrame(paren=False)
        expect_operand = True

        while True:
            token = cursor.peek()

            if expect_operand:
                if isinstance(token, ConstantToken):
                    cursor.advance()
                    frame.push_operand(self._constant(token))
                    expect_operand = False
                elif isinstance(token, ParenCloseToken):
                    cursor.advance()
                    enclosing.append(frame)
                    frame = ScanFrame(paren=True)
                else:
                    # Start of input, an operator or an opening parenthesis
                    raise MissingOperandError()

            elif isinstance(token, OperatorToken):
                cursor.advance()
                frame.push_operator(token.kind)
                expect_operand = True

            elif isinstance(token, (ConstantToken, ParenCloseToken)):
                if self.settings.strict_operands:
                    raise UnexpectedOperandError()
                dropped = frame.drop_operand()
                logger.debug("Operand %s dropped, no operator on its left", dropped)
                expect_operand = True

            else:
                # Start of input or an opening parenthesis ends the group
                group = frame.close()
                if not frame.paren:
                    if token is not None:
                        raise UnmatchedParenError()
                    logger.debug("Parsed tree %s", group)
                    return group
                if token is None:
                    raise UnmatchedParenError()
                cursor.advance()
                frame = enclosing.pop()
                frame.push_operand(group)

    def _constant(self, token: ConstantToken) -> ConstantExpression:
        if not self.settings.in_range(token.value):
            logger.debug("Constant %s exceeds %s-bit range", token.value, self.settings.int_bits)
            raise IntegerOverflowError()
        return ConstantExpression(value=token.value)
