"""Test the shared logger."""
import logging

from simple_math_parser.common.logger import LOG_LEVEL_ENV, get_logger


def test_logger_default_level(monkeypatch) -> None:
    """Without configuration only warnings and above are emitted."""
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    assert get_logger("simple_math_parser.test_default").level == logging.WARNING


def test_logger_level_from_env(monkeypatch) -> None:
    """The level is read from the environment, case-insensitively."""
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    assert get_logger("simple_math_parser.test_env").level == logging.DEBUG


def test_logger_ignores_unknown_level(monkeypatch) -> None:
    """Unknown level names fall back to WARNING."""
    monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
    assert get_logger("simple_math_parser.test_unknown").level == logging.WARNING


def test_logger_single_handler() -> None:
    """Building the same logger twice does not duplicate its handler."""
    get_logger("simple_math_parser.test_handler")
    assert len(get_logger("simple_math_parser.test_handler").handlers) == 1
