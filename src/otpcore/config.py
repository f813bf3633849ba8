"""Defaults and environment lookups."""

import os
from typing import Optional


DEFAULT_DIGITS = 6
DEFAULT_PERIOD = 30  # seconds per TOTP step
DEFAULT_HOTP_OFFSET = 0
DEFAULT_TOTP_OFFSET = 1

SECRET_ENV = "OTPCORE_SECRET"
LOG_LEVEL_ENV = "OTPCORE_LOG_LEVEL"


def getenv(key: str, default: Optional[str] = None, *aliases: str) -> Optional[str]:
    """Return the first non-empty environment variable among key and aliases."""
    for k in (key, *aliases):
        v = os.getenv(k)
        if v not in (None, ""):
            return v
    return default
