"""Shared logger for the calculator, written to stderr."""
import logging
import os
import sys


LOG_LEVEL_ENV: str = "CHECKED_CALC_LOG_LEVEL"

# Quiet by default: stderr also carries the single user-facing error line
DEFAULT_LEVEL: str = "WARNING"


def _build_logger() -> logging.Logger:
    """
    Create the package logger with a stderr handler.

    The level is read from the ``CHECKED_CALC_LOG_LEVEL`` environment variable.
    Unknown level names fall back to WARNING.

    :return: Configured logger
    :rtype: logging.Logger
    """
    log = logging.getLogger("checked_calc")
    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        log.addHandler(handler)
        log.propagate = False

    level_name: str = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LEVEL).upper()
    level = logging.getLevelName(level_name)
    log.setLevel(level if isinstance(level, int) else logging.WARNING)
    return log


logger: logging.Logger = _build_logger()
