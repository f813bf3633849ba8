"""Base-32 (RFC 4648, unpadded) secret decoding."""

import base64
import binascii

from otpcore.errors import NonBase32Error


_ALPHABET = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ234567")

# Unpadded lengths (mod 8) whose last character only carries leftover bits.
_PARTIAL_TAIL_LENGTHS = {1, 3, 6}


def decode_base32(secret: str) -> bytes:
    """
    Decode an unpadded base-32 secret into raw key bytes.

    Decoding is case-insensitive. Padding characters are not accepted in the
    input; the padding the standard codec expects is added here. Trailing
    bits that do not make up a whole byte are dropped.

    Args:
        secret: The base-32 encoded secret.

    Returns:
        Decoded secret as bytes.

    Raises:
        NonBase32Error: If the secret cannot be decoded.
    """
    if (
        not isinstance(secret, str)
        or not secret.isascii()
        or not _ALPHABET.issuperset(secret.upper())
    ):
        raise NonBase32Error("The secret provided is not a base-32 string.")

    if len(secret) % 8 in _PARTIAL_TAIL_LENGTHS:
        secret = secret[:-1]

    padded = secret + "=" * (-len(secret) % 8)
    try:
        return base64.b32decode(padded, casefold=True)
    except (binascii.Error, ValueError) as e:
        raise NonBase32Error("The secret provided is not a base-32 string.") from e
