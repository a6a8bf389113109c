#
# This file is part of the fourcc project
#
# Copyright (c) 2026 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

"""Conversion between 32-bit unsigned integers and FourCC codes.

A FourCC is the integer's four bytes taken in little-endian order, each
byte read as a single character (its code is the byte value), so
942948929 (0x383A3941) is "A9:8".
"""

import logging
import re

from .types import CharType, Iterator, Optional

log = logging.getLogger(__name__)

FOURCC_SIZE = 4
UINT32_MAX = (1 << 32) - 1
MAX_DIGITS = len(str(UINT32_MAX))

INTEGER = re.compile(r"[+-]?[0-9]+", re.ASCII)


class FourCCError(ValueError):
    exit_code = 1


class MissingArgument(FourCCError):
    """No input value supplied"""

    exit_code = 1


class InvalidInput(FourCCError):
    """Input is not a base-10 non-negative integer or not a valid code"""

    exit_code = 1


class OutOfRange(FourCCError):
    """Value does not fit in an unsigned 32-bit integer"""

    exit_code = 2


def check_value(value: int) -> int:
    """
    Make sure value is an int in the unsigned 32-bit range.

    Raises:
        InvalidInput: if value is not an int
        OutOfRange: if value is negative or bigger than 0xFFFFFFFF
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(f"{value!r} is not an integer")
    if not 0 <= value <= UINT32_MAX:
        raise OutOfRange(f"{value} is out of the unsigned 32-bit range [0, {UINT32_MAX}]")
    return value


def iter_bytes(value: int) -> Iterator[int]:
    """Bytes of value, least significant first"""
    return ((value >> (8 * i)) & 0xFF for i in range(FOURCC_SIZE))


def decode(value: int) -> str:
    """
    Decode an unsigned 32-bit integer into its 4 character FourCC.

    The least significant byte becomes the first character. Every byte
    value is kept as is, NUL and other control characters included, so
    the result is always 4 characters long.

    Example:
    ```python
    decode(942948929)  # "A9:8"
    decode(65)  # "A\\x00\\x00\\x00"
    ```
    """
    check_value(value)
    result = "".join(map(chr, iter_bytes(value)))
    log.debug("decoded %d (0x%08X) into %r", value, value, result)
    return result


def decode_bytes(value: int) -> bytes:
    """Same as decode but returns the 4 raw bytes"""
    check_value(value)
    return bytes(iter_bytes(value))


def parse(text: Optional[str]) -> int:
    """
    Parse a base-10 non-negative integer literal into a valid FourCC value.

    Args:
        text (str): decimal digits with an optional sign

    Returns:
        int: the parsed value

    Raises:
        MissingArgument: if text is None
        InvalidInput: if text is not a decimal integer literal
        OutOfRange: if the number is negative or does not fit in 32 bits
    """
    if text is None:
        raise MissingArgument("missing value to decode")
    if not INTEGER.fullmatch(text):
        raise InvalidInput(f"{text!r} is not a base-10 non-negative integer")
    # int() refuses very long literals, leading zeros included
    if len(text.lstrip("+-").lstrip("0")) > MAX_DIGITS:
        raise OutOfRange(f"{text[:MAX_DIGITS + 1]}... is out of the unsigned 32-bit range [0, {UINT32_MAX}]")
    return check_value(int(text))


def decode_text(text: Optional[str]) -> str:
    return decode(parse(text))


def _code_points(code: CharType) -> tuple[int, ...]:
    if isinstance(code, (bytes, bytearray)):
        points = tuple(code)
    elif isinstance(code, str):
        points = tuple(map(ord, code))
    else:
        raise InvalidInput(f"{code!r} is not text or bytes")
    if len(points) != FOURCC_SIZE:
        raise InvalidInput(f"FourCC {code!r} must be exactly {FOURCC_SIZE} characters long (got {len(points)})")
    if any(point > 0xFF for point in points):
        raise InvalidInput(f"FourCC {code!r} has characters outside the single byte range")
    return points


def encode(code: CharType) -> int:
    """
    Encode a 4 character FourCC into its unsigned 32-bit integer.
    This is the inverse of decode: the first character becomes the least
    significant byte.

    Example:
    ```python
    encode("A9:8")  # 942948929
    encode(b"YUYV")  # 1448695129
    ```
    """
    a, b, c, d = _code_points(code)
    return a | (b << 8) | (c << 16) | (d << 24)


def encode_be(code: CharType) -> int:
    """Big-endian variant of a FourCC: the encoded value with bit 31 set"""
    return encode(code) | (1 << 31)


def escape(code: str) -> str:
    """
    Printable rendition of a decoded FourCC. Control characters and codes
    above 0x7E are shown as \\xNN escapes, backslash as \\\\.
    """
    result = []
    for char in code:
        point = ord(char)
        if char == "\\":
            result.append("\\\\")
        elif point < 0x20 or point >= 0x7F:
            result.append(f"\\x{point:02x}")
        else:
            result.append(char)
    return "".join(result)
