"""Evaluate expression trees with fixed-width signed integer arithmetic."""
import operator
from typing import Callable, Dict, List

from pydantic import BaseModel, ConfigDict, Field

from simple_math_parser.common.config import EvaluatorConfig, OverflowPolicy
from simple_math_parser.common.errors import DivisionByZeroError, IntegerOverflowError
from simple_math_parser.common.logger import logger
from simple_math_parser.common.models import ConstantExpression, Expression, OperatorKind


# Type alias for operator functions (taking two ints, returning an int)
OperatorFn = Callable[[int, int], int]


def truncating_div(a: int, b: int) -> int:
    """
    Integer division rounding toward zero, as signed machine division does.

    Python's ``//`` floors instead, which differs for operands of opposite sign.

    :param int a: Dividend
    :param int b: Divisor, non-zero

    :return: Quotient truncated toward zero
    :rtype: int
    """
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


# Mapping of operator kinds to their integer function
OPERATIONS: Dict[OperatorKind, OperatorFn] = {
    OperatorKind.ADD: operator.add,
    OperatorKind.SUB: operator.sub,
    OperatorKind.MUL: operator.mul,
    OperatorKind.DIV: truncating_div,
}


class Evaluator(BaseModel):
    """
    Compute the integer value of an expression tree.

    The tree is flattened into Reverse Polish Notation and evaluated with an
    operand stack, so the depth of the tree is not limited by the interpreter
    recursion limit. Every intermediate result is brought back into the
    configured signed range according to the overflow policy.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    settings: EvaluatorConfig = Field(default_factory=EvaluatorConfig, description="Integer range and overflow policy")

    def evaluate(self, tree: Expression) -> int:
        """
        Evaluate an expression tree.

        :param Expression tree: Root of the tree

        :return: Computed result
        :rtype: int
        :raises DivisionByZeroError: If a divisor evaluates to zero
        :raises IntegerOverflowError: If a result leaves the range under the ``error`` policy
        """
        stack: List[int] = []
        for node in tree.to_rpn():
            if isinstance(node, ConstantExpression):
                stack.append(node.value)
                continue

            b: int = stack.pop()
            a: int = stack.pop()
            if node.kind is OperatorKind.DIV and b == 0:
                logger.debug("Division by zero in %s / %s", a, b)
                raise DivisionByZeroError()
            stack.append(self._fit(OPERATIONS[node.kind](a, b)))

        return stack[0]

    def _fit(self, value: int) -> int:
        """Apply the overflow policy to a raw result."""
        if self.settings.in_range(value):
            return value

        policy = self.settings.overflow
        logger.debug("Result %s exceeds %s-bit range, policy %s", value, self.settings.int_bits, policy.value)

        if policy is OverflowPolicy.WRAP:
            modulus = 1 << self.settings.int_bits
            return (value - self.settings.min_value) % modulus + self.settings.min_value
        if policy is OverflowPolicy.SATURATE:
            return max(self.settings.min_value, min(self.settings.max_value, value))
        raise IntegerOverflowError()
