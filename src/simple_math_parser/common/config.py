"""Evaluation settings: integer width, overflow policy and operand strictness."""
from enum import Enum
import os
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

ENV_PREFIX = "SIMPLE_MATH_PARSER_"


class OverflowPolicy(str, Enum):
    """What happens when a value leaves the signed integer range."""

    ERROR = "error"
    WRAP = "wrap"
    SATURATE = "saturate"


class EvaluatorConfig(BaseModel):
    """
    Settings shared by the parser and the evaluator.

    Attributes
    ----------
    int_bits : int
        Width of the signed integer type constants and results must fit in.
    overflow : OverflowPolicy
        Reaction to an arithmetic result outside that range. Constants that
        do not fit are always rejected.
    strict_operands : bool
        Reject two operands with no operator between them. When disabled,
        the operand further left silently replaces the pending one.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    int_bits: int = Field(default=32, ge=2, le=128, description="Signed integer width in bits")
    overflow: OverflowPolicy = Field(default=OverflowPolicy.ERROR, description="Arithmetic overflow policy")
    strict_operands: bool = Field(default=True, description="Reject adjacent operands")

    @property
    def min_value(self) -> int:
        return -(1 << (self.int_bits - 1))

    @property
    def max_value(self) -> int:
        return (1 << (self.int_bits - 1)) - 1

    def in_range(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    @classmethod
    def from_env(cls) -> "EvaluatorConfig":
        """
        Build a configuration from ``SIMPLE_MATH_PARSER_*`` environment variables.

        Unset variables keep their defaults.

        :return: Validated configuration
        :rtype: EvaluatorConfig
        :raises pydantic.ValidationError: If a variable holds an invalid value
        """
        values: Dict[str, str] = {}
        for name in cls.model_fields:
            raw = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
            if raw is not None:
                values[name] = raw.strip().lower()
        return cls(**values)
