"""Common conversion methods."""

import re
from typing import TypeAlias

UintConvertible: TypeAlias = str | int

MAX_UINT64 = 2**64 - 1
MAX_UINT256 = 2**256 - 1

HEX_DIGITS_PATTERN = re.compile(r"[0-9a-fA-F]+")
DEC_DIGITS_PATTERN = re.compile(r"[0-9]+")


def to_uint(
    input_number: UintConvertible,
    max_value: int = MAX_UINT256,
    max_native_value: int = MAX_UINT64,
) -> int:
    """
    Convert a native integer or its string representation into an unsigned integer.

    Strings are either `0x`-prefixed hexadecimal or plain decimal digits. The empty
    string and a bare `0x` both convert to zero. Native integers are limited to
    `max_native_value`; larger values must be written as strings.
    """
    if isinstance(input_number, bool):
        raise ValueError(f"boolean is not a valid unsigned integer: {input_number}")
    if isinstance(input_number, int):
        value = int(input_number)
        if value > max_native_value:
            raise ValueError(
                f"native integer {value} is larger than {max_native_value}, "
                "write it as a hex or decimal string"
            )
    elif isinstance(input_number, str):
        value = str_to_uint(input_number)
    else:
        raise ValueError(f"invalid type for unsigned integer: {type(input_number).__name__}")
    if value < 0:
        raise ValueError(f"unsigned integer cannot be negative: {value}")
    if value > max_value:
        raise ValueError(f"value {value} is larger than the maximum {max_value}")
    return value


def str_to_uint(input_str: str) -> int:
    """Convert a hexadecimal (`0x...`) or decimal string into an integer."""
    if input_str in ("", "0x"):
        return 0
    if input_str.startswith("0x"):
        digits = input_str[2:]
        if not HEX_DIGITS_PATTERN.fullmatch(digits):
            raise ValueError(f"invalid hexadecimal number: {input_str!r}")
        return int(digits, 16)
    if not DEC_DIGITS_PATTERN.fullmatch(input_str):
        raise ValueError(f"invalid decimal number: {input_str!r}")
    return int(input_str, 10)

