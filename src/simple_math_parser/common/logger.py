"""Shared logger used across the expression pipeline."""
import logging
import os
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL_ENV = "SIMPLE_MATH_PARSER_LOG_LEVEL"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_logger(name: str = "simple_math_parser") -> logging.Logger:
    """
    Build the package logger.

    Records go to standard error so that standard output only ever carries
    the evaluated result. The level is read from ``SIMPLE_MATH_PARSER_LOG_LEVEL``
    and defaults to WARNING.

    :param str name: Logger name

    :return: Configured logger
    :rtype: logging.Logger
    """
    log = logging.getLogger(name)
    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(handler)

    level: str = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    log.setLevel(level if level in LOG_LEVELS else "WARNING")
    return log


logger = get_logger()
