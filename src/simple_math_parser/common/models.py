"""Pydantic models for tokens, expression trees and evaluation results."""
from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class OperatorKind(str, Enum):
    """Binary arithmetic operators, valued by their symbol."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @property
    def precedence(self) -> int:
        """Binding strength: multiplicative operators bind tighter than additive ones."""
        return 2 if self in (OperatorKind.MUL, OperatorKind.DIV) else 1


class OperatorToken(BaseModel):
    """An operator symbol."""

    model_config = ConfigDict(frozen=True)

    kind: OperatorKind = Field(..., description="Operator represented by the token")


class ConstantToken(BaseModel):
    """An unsigned decimal constant."""

    model_config = ConfigDict(frozen=True)

    value: int = Field(..., ge=0, description="Value folded from a run of digits")


class ParenOpenToken(BaseModel):
    """An opening parenthesis."""

    model_config = ConfigDict(frozen=True)


class ParenCloseToken(BaseModel):
    """A closing parenthesis."""

    model_config = ConfigDict(frozen=True)


Token = Union[OperatorToken, ConstantToken, ParenOpenToken, ParenCloseToken]


class ConstantExpression(BaseModel):
    """Leaf of the expression tree: a signed integer literal."""

    model_config = ConfigDict(frozen=True)

    value: int = Field(..., description="Signed integer value")

    def to_rpn(self) -> List["Expression"]:
        return [self]

    def __str__(self) -> str:
        return str(self.value)


class OperatorExpression(BaseModel):
    """Inner node of the expression tree: a binary operation on two sub-trees."""

    model_config = ConfigDict(frozen=True)

    kind: OperatorKind = Field(..., description="Operation applied to both operands")
    left: "Expression" = Field(..., description="Left operand")
    right: "Expression" = Field(..., description="Right operand")

    def to_rpn(self) -> List["Expression"]:
        """
        List the nodes of the tree in Reverse Polish Notation order.

        The walk uses an explicit stack, so arbitrarily deep trees are safe.

        :return: Nodes in postfix order, operands before their operator
        :rtype: List[Expression]
        """
        output: List[Expression] = []
        stack: List[Expression] = [self]
        while stack:
            node = stack.pop()
            output.append(node)
            if isinstance(node, OperatorExpression):
                # Root, right, left walk; reversed it is left, right, root
                stack.append(node.left)
                stack.append(node.right)
        output.reverse()
        return output

    def __str__(self) -> str:
        parts: List[str] = []
        for node in self.to_rpn():
            if isinstance(node, OperatorExpression):
                right = parts.pop()
                left = parts.pop()
                parts.append(f"({left} {node.kind.value} {right})")
            else:
                parts.append(str(node))
        return parts[0]


Expression = Union[OperatorExpression, ConstantExpression]

OperatorExpression.model_rebuild()


class OperationResult(BaseModel):
    """Outcome of evaluating one expression: either a result or an error message."""

    model_config = ConfigDict(frozen=True)

    expression: str = Field(..., description="Original arithmetic expression")
    result: Optional[int] = Field(default=None, description="Evaluated integer result")
    error: Optional[str] = Field(default=None, description="Error message if evaluation failed")

    @model_validator(mode="after")
    def result_xor_error(self) -> "OperationResult":
        """Ensure exactly one of result and error is set."""
        if (self.result is None) == (self.error is None):
            raise ValueError("Exactly one of result and error must be set")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None
