#
# This file is part of the fourcc project
#
# Copyright (c) 2026 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

"""Decode 32-bit unsigned integers into their little-endian FourCC codes (and back)"""

__version__ = "0.1.0"

from .codec import (  # noqa: E402
    FOURCC_SIZE,
    UINT32_MAX,
    FourCCError,
    InvalidInput,
    MissingArgument,
    OutOfRange,
    decode,
    decode_bytes,
    decode_text,
    encode,
    encode_be,
    escape,
    parse,
)

__all__ = [
    "FOURCC_SIZE",
    "UINT32_MAX",
    "FourCCError",
    "InvalidInput",
    "MissingArgument",
    "OutOfRange",
    "decode",
    "decode_bytes",
    "decode_text",
    "encode",
    "encode_be",
    "escape",
    "parse",
]
