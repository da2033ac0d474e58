"""Shared logger for the keypad calculator."""
import logging
import os


LOG_LEVEL_ENV = "KEYPAD_CALCULATOR_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "INFO"

logger = logging.getLogger("keypad_calculator")

if not logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)


def set_level(level: str) -> None:
    """
    Change the level of the shared logger.

    :param str level: Level name, e.g. "DEBUG" or "warning"
    :raises ValueError: If the level name is unknown
    """
    logger.setLevel(level.upper())


def _level_from_env() -> str:
    """Level named by the environment, or the default when unset or unknown."""
    level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    if level not in LOG_LEVELS:
        logger.setLevel(DEFAULT_LOG_LEVEL)
        logger.warning(
            f"Unknown {LOG_LEVEL_ENV}={level!r}, falling back to {DEFAULT_LOG_LEVEL}"
        )
        return DEFAULT_LOG_LEVEL
    return level


set_level(_level_from_env())
