#
# This file is part of the fourcc project
#
# Copyright (c) 2026 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

import argparse
import logging
import os
import sys

from fourcc import __version__
from fourcc.codec import FourCCError, MissingArgument, decode_bytes, decode_text, encode, escape, parse
from fourcc.types import Optional, Sequence

log = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def write_raw(data: bytes):
    # bytes >= 0x80 must come out as single bytes, whatever the stdout encoding
    sys.stdout.flush()
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()


def decode_cmd(args):
    if args.escape:
        print(escape(decode_text(args.value)))
    else:
        write_raw(decode_bytes(parse(args.value)) + b"\n")


def encode_cmd(args):
    if args.value is None:
        raise MissingArgument("missing FourCC code to encode")
    # decode writes raw bytes so read the argument back as raw bytes
    print(encode(os.fsencode(args.value)))


def cli():
    parser = argparse.ArgumentParser(
        prog="fourcc", description="decode a 32-bit unsigned integer into its little-endian FourCC code"
    )
    parser.add_argument("value", nargs="?", help="decimal integer (or 4 character code with --encode)")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("-e", "--encode", action="store_true", help="encode a FourCC code into its integer")
    mode.add_argument("--escape", action="store_true", help="show non printable characters as \\xNN escapes")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="WARNING", type=str.upper, help="log level")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(args):
    if args.encode:
        encode_cmd(args)
    else:
        decode_cmd(args)


def main(args: Optional[Sequence[str]] = None):
    parser = cli()
    args = parser.parse_args(args=args)
    logging.basicConfig(level=args.log_level)
    try:
        run(args)
    except FourCCError as error:
        log.debug("%s failed: %r", "encode" if args.encode else "decode", error)
        parser.exit(error.exit_code, f"{parser.prog}: error: {error}\n")
    except KeyboardInterrupt:
        print("\rCtrl-C pressed. Bailing out")


if __name__ == "__main__":
    main()
