"""Test class EvaluatorConfig."""
from pydantic import ValidationError
import pytest

from simple_math_parser.common.config import EvaluatorConfig, OverflowPolicy


def test_config_defaults() -> None:
    """Defaults describe strict 32-bit arithmetic that rejects overflow."""
    config = EvaluatorConfig()
    assert config.int_bits == 32
    assert config.overflow is OverflowPolicy.ERROR
    assert config.strict_operands is True
    assert config.min_value == -2147483648
    assert config.max_value == 2147483647


@pytest.mark.parametrize("bits,low,high", [
    (8, -128, 127),
    (16, -32768, 32767),
    (64, -9223372036854775808, 9223372036854775807),
])
def test_config_range(bits, low, high) -> None:
    """The signed range follows the configured width."""
    config = EvaluatorConfig(int_bits=bits)
    assert (config.min_value, config.max_value) == (low, high)
    assert config.in_range(low) and config.in_range(high)
    assert not config.in_range(low - 1)
    assert not config.in_range(high + 1)


@pytest.mark.parametrize("bits", [0, 1, 129])
def test_config_invalid_width(bits) -> None:
    """Widths outside 2..128 raise a validation error."""
    with pytest.raises(ValidationError):
        EvaluatorConfig(int_bits=bits)


def test_config_invalid_policy() -> None:
    """Unknown overflow policies raise a validation error."""
    with pytest.raises(ValidationError):
        EvaluatorConfig(overflow="explode")


def test_config_is_immutable() -> None:
    """Settings cannot change once built."""
    config = EvaluatorConfig()
    with pytest.raises(ValidationError):
        config.int_bits = 64


def test_config_from_env(monkeypatch) -> None:
    """Environment variables override the defaults."""
    monkeypatch.setenv("SIMPLE_MATH_PARSER_INT_BITS", "16")
    monkeypatch.setenv("SIMPLE_MATH_PARSER_OVERFLOW", "Saturate")
    monkeypatch.setenv("SIMPLE_MATH_PARSER_STRICT_OPERANDS", "false")
    config = EvaluatorConfig.from_env()
    assert config.int_bits == 16
    assert config.overflow is OverflowPolicy.SATURATE
    assert config.strict_operands is False


def test_config_from_env_defaults(monkeypatch) -> None:
    """Unset variables keep their defaults."""
    for name in ("INT_BITS", "OVERFLOW", "STRICT_OPERANDS"):
        monkeypatch.delenv(f"SIMPLE_MATH_PARSER_{name}", raising=False)
    assert EvaluatorConfig.from_env() == EvaluatorConfig()


def test_config_from_env_invalid(monkeypatch) -> None:
    """Invalid environment values raise a validation error."""
    monkeypatch.setenv("SIMPLE_MATH_PARSER_INT_BITS", "lots")
    with pytest.raises(ValidationError):
        EvaluatorConfig.from_env()


def test_config_rejects_unknown_field() -> None:
    """A misspelt option raises instead of being ignored."""
    with pytest.raises(ValidationError):
        EvaluatorConfig(int_width=16)
