"""Errors raised by the HOTP and TOTP engines."""

import enum


class ErrorType(enum.Enum):
    """Kinds of failure an OTP operation can report."""

    NON_BASE32 = "non_base32"
    INVALID_COUNTER = "invalid_counter"
    INVALID_OFFSET = "invalid_offset"


class OTPError(Exception):
    """
    Base error for otpcore.

    Attributes:
        error_type: The ErrorType tag describing the failure.
        description: Human-readable description of what went wrong.
    """

    error_type: ErrorType

    def __init__(self, description: str):
        super().__init__(description)
        self.description = description

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.description!r})"


class NonBase32Error(OTPError, ValueError):
    """The secret supplied is not a base-32 string."""

    error_type = ErrorType.NON_BASE32


class InvalidCounterError(OTPError, ValueError):
    """A counter could not be derived or encoded."""

    error_type = ErrorType.INVALID_COUNTER


class InvalidOffsetError(OTPError, ValueError):
    """The verification offset is too large or too small."""

    error_type = ErrorType.INVALID_OFFSET
