"""Signed 14-bit integer codec for the instruction stream wire format."""

from .errors import MalformedHexError, RangeError

MIN_VALUE = -8192
MAX_VALUE = 8191

# Each wire byte is two hex characters
BYTE_LENGTH = 2
BYTE_MAX = 0x7F

TRANSLATION = 8192
LOW_ORDER_MASK = 0x7F
HIGH_ORDER_MASK = 0xFF80

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def encode(value: int) -> str:
    """Encode a value in [-8192, 8191] as four uppercase hex digits."""
    if value < MIN_VALUE or value > MAX_VALUE:
        raise RangeError(f"{value} out of range [{MIN_VALUE}, {MAX_VALUE}]")

    translated = value + TRANSLATION
    low = translated & LOW_ORDER_MASK
    high = translated & HIGH_ORDER_MASK
    return f"{high << 1 | low:04X}"


def decode_byte(token: str) -> int:
    """Decode one two-character hex byte, optionally prefixed with 0x."""
    if token[:2] in ("0x", "0X"):
        token = token[2:]
    if len(token) != BYTE_LENGTH or not HEX_DIGITS.issuperset(token):
        raise MalformedHexError(f"Invalid hex byte: {token!r}")
    return int(token, 16)


def decode(hi: str, lo: str) -> int:
    """Decode a hi/lo pair of hex byte tokens into a signed value."""
    hi_value = decode_byte(hi)
    lo_value = decode_byte(lo)
    if hi_value > BYTE_MAX or lo_value > BYTE_MAX:
        raise RangeError(f"Parameter bytes {hi}{lo} out of range [00, 7F]")
    return (hi_value << 7 | lo_value) - TRANSLATION
