"""Run the tokenize, parse and evaluate pipeline on an expression string."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from simple_math_parser.common.config import EvaluatorConfig
from simple_math_parser.common.errors import ExpressionError
from simple_math_parser.common.evaluator import Evaluator
from simple_math_parser.common.logger import logger
from simple_math_parser.common.models import OperationResult
from simple_math_parser.common.parser import ExpressionParser
from simple_math_parser.common.tokenizer import Tokenizer


class Calculator(BaseModel):
    """
    Evaluate arithmetic expressions end to end.

    Pipeline:
        - Tokenize the raw text
        - Build the expression tree with a reverse scan
        - Evaluate the tree to a signed integer

    The first error aborts the run. ``evaluate`` raises it, ``run`` turns it
    into an :class:`OperationResult` carrying the message.
    """

    # Make the Pydantic instance immutable so one calculator always computes
    # the same result for the same text
    model_config = ConfigDict(frozen=True, extra="forbid")

    settings: EvaluatorConfig = Field(default_factory=EvaluatorConfig, description="Evaluation settings")

    def evaluate(self, expr: str) -> int:
        """
        Evaluate an arithmetic expression.

        :param str expr: Arithmetic expression string

        :return: Computed result
        :rtype: int
        :raises ExpressionError: If the expression is invalid or cannot be computed
        """
        tokens = Tokenizer.tokenize(expr)
        tree = ExpressionParser(settings=self.settings).parse(tokens)
        return Evaluator(settings=self.settings).evaluate(tree)

    def run(self, expr: str) -> OperationResult:
        """
        Evaluate an arithmetic expression and report the result or the error.

        :param str expr: Arithmetic expression string

        :return: Result record with either ``result`` or ``error`` set
        :rtype: OperationResult
        """
        try:
            result = self.evaluate(expr)
        except ExpressionError as exc:
            logger.error(f"❌ Could not evaluate {expr!r}: {exc}")
            return OperationResult(expression=expr, error=str(exc))

        logger.info(f"✅ {expr!r} = {result}")
        return OperationResult(expression=expr, result=result)


def evaluate(expr: str, settings: Optional[EvaluatorConfig] = None) -> int:
    """Evaluate ``expr`` with the given settings, or the defaults."""
    return Calculator(settings=settings or EvaluatorConfig()).evaluate(expr)
