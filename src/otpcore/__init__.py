"""HOTP (RFC 4226) and TOTP (RFC 6238) code generation and verification."""

import logging

from otpcore.base32 import decode_base32
from otpcore.errors import (
    ErrorType,
    InvalidCounterError,
    InvalidOffsetError,
    NonBase32Error,
    OTPError,
)
from otpcore.hotp import (
    MAX_COUNTER,
    Digits,
    check_hotp,
    generate_hotp,
    generate_hotp_string,
)
from otpcore.totp import check_totp, generate_totp, generate_totp_string, timecode


__all__ = [
    "MAX_COUNTER",
    "Digits",
    "ErrorType",
    "InvalidCounterError",
    "InvalidOffsetError",
    "NonBase32Error",
    "OTPError",
    "check_hotp",
    "check_totp",
    "decode_base32",
    "generate_hotp",
    "generate_hotp_string",
    "generate_totp",
    "generate_totp_string",
    "timecode",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
