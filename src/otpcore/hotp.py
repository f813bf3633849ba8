"""RFC 4226 HOTP (HMAC-based One-Time Password) generation and verification."""

import enum
import logging
from typing import Union

from cryptography.hazmat.primitives import hashes, hmac

from otpcore.base32 import decode_base32
from otpcore.errors import InvalidCounterError, InvalidOffsetError


logger = logging.getLogger(__name__)

# Counters are encoded as 8 big-endian bytes.
MAX_COUNTER = 2**64 - 1


class Digits(enum.IntEnum):
    """Supported code lengths."""

    SIX = 6
    SEVEN = 7
    EIGHT = 8

    @property
    def modulus(self) -> int:
        return 10**self.value


DigitsLike = Union[Digits, int]


def _check_counter(counter: int) -> None:
    if (
        not isinstance(counter, int)
        or isinstance(counter, bool)
        or not 0 <= counter <= MAX_COUNTER
    ):
        raise InvalidCounterError(
            f"The counter must be an integer between 0 and {MAX_COUNTER}."
        )


def _hmac_sha1(key: bytes, counter: int) -> bytes:
    # RFC 4226 fixes the digest to SHA1
    mac = hmac.HMAC(key, hashes.SHA1())
    mac.update(counter.to_bytes(8, byteorder="big"))
    return mac.finalize()


def _truncate(tag: bytes) -> int:
    """Dynamic truncation (RFC 4226, Section 5.3) to a 31-bit integer."""
    offset = tag[19] & 0x0F
    return (
        ((tag[offset] & 0x7F) << 24)
        | ((tag[offset + 1] & 0xFF) << 16)
        | ((tag[offset + 2] & 0xFF) << 8)
        | (tag[offset + 3] & 0xFF)
    )


def _code(key: bytes, counter: int, digits: Digits) -> int:
    return _truncate(_hmac_sha1(key, counter)) % digits.modulus


def _code_string(key: bytes, counter: int, digits: Digits) -> str:
    return f"{_code(key, counter, digits):0{digits.value}d}"


def generate_hotp(counter: int, secret: str, digits: DigitsLike = Digits.SIX) -> int:
    """
    Generate an HOTP code as a number.

    Args:
        counter: The moving counter value, 0 to 2**64 - 1.
        secret: The shared secret as an unpadded base-32 string.
        digits: Number of digits in the code (6, 7 or 8).

    Returns:
        The code, always less than 10**digits.

    Raises:
        NonBase32Error: If the secret cannot be decoded.
        InvalidCounterError: If the counter does not fit in 8 bytes.
        ValueError: If digits is not 6, 7 or 8.
    """
    digits = Digits(digits)
    _check_counter(counter)
    return _code(decode_base32(secret), counter, digits)


def generate_hotp_string(
    counter: int, secret: str, digits: DigitsLike = Digits.SIX
) -> str:
    """
    Generate an HOTP code zero-padded to exactly ``digits`` characters.

    Raises the same errors as generate_hotp().
    """
    digits = Digits(digits)
    return f"{generate_hotp(counter, secret, digits):0{digits.value}d}"


def check_hotp(
    counter: int,
    secret: str,
    offset: int,
    comparison: str,
    digits: DigitsLike = Digits.SIX,
) -> bool:
    """
    Check whether a code is valid for a counter, allowing for drift.

    With an offset of 0 only the code at ``counter`` is accepted. Otherwise
    every counter in ``[counter - offset, counter + offset]`` is tried in
    ascending order, with the bounds clamped to the valid counter range.

    Args:
        counter: The expected counter value.
        secret: The shared secret as an unpadded base-32 string.
        offset: Number of counter positions accepted either side of counter.
        comparison: The code to check.
        digits: Number of digits in the code (6, 7 or 8).

    Returns:
        True if comparison matches a code inside the window.

    Raises:
        NonBase32Error: If the secret cannot be decoded.
        InvalidCounterError: If the counter does not fit in 8 bytes.
        InvalidOffsetError: If the offset is negative or does not fit in 8 bytes.
        ValueError: If digits is not 6, 7 or 8.
    """
    digits = Digits(digits)
    _check_counter(counter)
    if not isinstance(offset, int) or not 0 <= offset <= MAX_COUNTER:
        raise InvalidOffsetError(
            f"The offset must be an integer between 0 and {MAX_COUNTER}."
        )

    key = decode_base32(secret)

    if offset == 0:
        return _code_string(key, counter, digits) == comparison

    # Saturate rather than wrap at either end of the counter range
    low = max(counter - offset, 0)
    high = min(counter + offset, MAX_COUNTER)
    logger.debug("Checking HOTP window %d..%d (%d digits)", low, high, digits)

    for candidate in range(low, high + 1):
        if _code_string(key, candidate, digits) == comparison:
            return True
    return False
