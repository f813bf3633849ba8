"""Logger setup for command-line use."""

import logging
from typing import Optional

from otpcore.config import LOG_LEVEL_ENV, getenv


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Create or return a logger that writes to stderr.

    The level defaults to the OTPCORE_LOG_LEVEL environment variable, or
    WARNING when that is unset or unknown. Secrets and codes are never passed
    to the logger.
    """
    logger = logging.getLogger(name)
    if any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        return logger

    env_level = logging.getLevelName((getenv(LOG_LEVEL_ENV) or "WARNING").upper())
    if not isinstance(env_level, int):
        env_level = logging.WARNING
    resolved_level = level or env_level
    logger.setLevel(resolved_level)
    handler = logging.StreamHandler()
    handler.setLevel(resolved_level)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)
    logger.propagate = False
    return logger
