"""RFC 6238 TOTP (Time-based One-Time Password) on top of HOTP."""

import logging
import math
import time
from typing import Optional

from otpcore import hotp
from otpcore.errors import InvalidCounterError, InvalidOffsetError
from otpcore.hotp import MAX_COUNTER, Digits, DigitsLike


logger = logging.getLogger(__name__)

# Step offsets are 16-bit.
MAX_STEP_OFFSET = 2**16 - 1


def timecode(duration_secs: int, for_time: Optional[float] = None) -> int:
    """
    Derive the TOTP counter for an instant.

    Args:
        duration_secs: Step length in seconds, must be positive.
        for_time: Seconds since the UNIX epoch (default: the current time).

    Returns:
        Number of whole steps elapsed since the epoch.

    Raises:
        InvalidCounterError: If the step is out of range or the time is
            not a finite instant after the epoch.
    """
    if (
        not isinstance(duration_secs, int)
        or isinstance(duration_secs, bool)
        or not 0 < duration_secs <= MAX_COUNTER
    ):
        raise InvalidCounterError(
            f"The duration must be between 1 and {MAX_COUNTER} seconds."
        )

    if for_time is None:
        for_time = time.time()
    if not math.isfinite(for_time) or for_time < 0:
        raise InvalidCounterError("Could not calculate a value for the current counter.")

    return int(for_time) // duration_secs


def generate_totp(
    secret: str,
    duration_secs: int,
    digits: DigitsLike = Digits.SIX,
    for_time: Optional[float] = None,
) -> int:
    """
    Generate the TOTP code for the current step as a number.

    Args:
        secret: The shared secret as an unpadded base-32 string.
        duration_secs: How long each code is valid for, in seconds.
        digits: Number of digits in the code (6, 7 or 8).
        for_time: Seconds since the UNIX epoch (default: the current time).

    Raises:
        InvalidCounterError: If no counter can be derived from the time.
        NonBase32Error: If the secret cannot be decoded.
    """
    return hotp.generate_hotp(timecode(duration_secs, for_time), secret, digits)


def generate_totp_string(
    secret: str,
    duration_secs: int,
    digits: DigitsLike = Digits.SIX,
    for_time: Optional[float] = None,
) -> str:
    """Generate the TOTP code for the current step, zero-padded."""
    return hotp.generate_hotp_string(
        timecode(duration_secs, for_time), secret, digits
    )


def check_totp(
    secret: str,
    offset: int,
    comparison: str,
    duration_secs: int,
    digits: DigitsLike = Digits.SIX,
    for_time: Optional[float] = None,
) -> bool:
    """
    Check a TOTP code against the current step.

    A non-zero offset widens the accepted HOTP window to
    ``duration_secs * offset`` counter positions either side of the
    current step.

    Args:
        secret: The shared secret as an unpadded base-32 string.
        offset: Number of steps of drift to accept (0 to 65535).
        comparison: The code to check.
        duration_secs: How long each code is valid for, in seconds.
        digits: Number of digits in the code (6, 7 or 8).
        for_time: Seconds since the UNIX epoch (default: the current time).

    Returns:
        True if comparison is valid.

    Raises:
        InvalidCounterError: If no counter can be derived from the time.
        InvalidOffsetError: If the offset is out of range or the window
            overflows the counter range.
        NonBase32Error: If the secret cannot be decoded.
    """
    counter = timecode(duration_secs, for_time)

    if not isinstance(offset, int) or not 0 <= offset <= MAX_STEP_OFFSET:
        raise InvalidOffsetError(
            f"The offset must be an integer between 0 and {MAX_STEP_OFFSET}."
        )

    if offset == 0:
        return hotp.check_hotp(counter, secret, 0, comparison, digits)

    window = duration_secs * offset
    if window > MAX_COUNTER:
        raise InvalidOffsetError(
            "Either the duration provided or the offset specified is too large."
        )

    logger.debug("TOTP offset of %d steps widened to %d counters", offset, window)
    return hotp.check_hotp(counter, secret, window, comparison, digits)
