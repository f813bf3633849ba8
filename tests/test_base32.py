"""Tests for base-32 secret decoding."""

import pytest

from otpcore.base32 import decode_base32
from otpcore.errors import ErrorType, NonBase32Error


# RFC 4648 test vectors (Section 10), padding stripped
RFC4648_TEST_VECTORS = [
    ("", b""),
    ("MY", b"f"),
    ("MZXQ", b"fo"),
    ("MZXW6", b"foo"),
    ("MZXW6YQ", b"foob"),
    ("MZXW6YTB", b"fooba"),
    ("MZXW6YTBOI", b"foobar"),
]


def test_rfc4648_test_vectors():
    """Test decoding against RFC 4648 test vectors."""
    for encoded, expected in RFC4648_TEST_VECTORS:
        assert decode_base32(encoded) == expected, f"{encoded!r} decoded incorrectly"


def test_decode_otp_secret():
    """Test decoding a typical OTP secret."""
    assert decode_base32("GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ") == b"12345678901234567890"


def test_decode_is_case_insensitive():
    """Lowercase secrets decode to the same bytes."""
    assert decode_base32("mzxw6ytboi") == decode_base32("MZXW6YTBOI")
    assert len(decode_base32("abcdef234567")) == 7


@pytest.mark.parametrize(
    "secret",
    [
        "not-base32-!!!",
        "GEZDGNBV1",  # '1' is not in the alphabet
        "MZXW6===",  # padding is not accepted
        "MZXW 6YQ",
        "MZXW6YÄ",
        "ABCDEFGH1",  # invalid character in the dropped tail
    ],
)
def test_decode_invalid(secret):
    """Strings outside the unpadded base-32 alphabet are rejected."""
    with pytest.raises(NonBase32Error) as exc_info:
        decode_base32(secret)

    assert exc_info.value.error_type is ErrorType.NON_BASE32
    assert "not a base-32 string" in exc_info.value.description


def test_decode_non_string():
    """Only strings are accepted."""
    with pytest.raises(NonBase32Error):
        decode_base32(b"MZXW6YQ")
    with pytest.raises(NonBase32Error):
        decode_base32(None)


def test_decode_drops_partial_trailing_bits():
    """A final character that cannot complete a byte is ignored."""
    assert decode_base32("ABCDEFGHI") == decode_base32("ABCDEFGH")
    assert len(decode_base32("ABCDEFGHI")) == 5
    assert decode_base32("MZXW6YTBOIA") == b"foobar"
    assert decode_base32("MZXW6YTBA") == b"fooba"
    assert decode_base32("A") == b""


def test_hotp_accepts_odd_length_secret():
    """Secrets of any length made of alphabet characters can be used."""
    from otpcore.hotp import generate_hotp_string

    assert generate_hotp_string(0, "ABCDEFGHI") == generate_hotp_string(0, "ABCDEFGH")
