"""Tests for the integer codec."""

import pytest

from hexplot.codec import decode, decode_byte, encode
from hexplot.errors import MalformedHexError, RangeError


@pytest.mark.parametrize(
    "value, wire",
    [(0, "4000"), (-8192, "0000"), (8191, "7F7F"), (2048, "5000"), (-4096, "2000"), (2696, "5508")],
)
def test_encode_known_values(value, wire):
    assert encode(value) == wire


@pytest.mark.parametrize("value", [-8193, 8192, 100000])
def test_encode_rejects_out_of_range(value):
    with pytest.raises(RangeError):
        encode(value)


def test_decode_known_values():
    assert decode("40", "00") == 0
    assert decode("00", "00") == -8192
    assert decode("7F", "7F") == 8191
    assert decode("50", "00") == 2048
    assert decode("0A", "05") == -6907


def test_decode_accepts_prefixed_tokens():
    assert decode("0x55", "0x08") == 2696


def test_decode_round_trip():
    for value in range(-8192, 8192):
        wire = encode(value)
        assert decode(wire[:2], wire[2:]) == value


@pytest.mark.parametrize("hi, lo", [("80", "00"), ("40", "FF")])
def test_decode_rejects_bytes_above_7f(hi, lo):
    with pytest.raises(RangeError):
        decode(hi, lo)


@pytest.mark.parametrize("token", ["G0", "+1", " 1", "1", "123"])
def test_decode_byte_rejects_malformed(token):
    with pytest.raises(MalformedHexError):
        decode_byte(token)


def test_decode_byte_lowercase():
    assert decode_byte("f0") == 0xF0
