# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
import argparse
import logging
import sys

from .decoder       import  decode
from .encoder       import  encode, DEFAULT_LINE_LENGTH, \
                            DEFAULT_WRAP_SEPARATOR
from .exceptions    import  A85BaseError
from .files         import  read_bytes, write_bytes, write_text

logger = logging.getLogger(__name__)

LOG_FORMAT      = "[%(levelname)s] %(message)s"
LOG_LEVELS      = (logging.WARNING, logging.INFO, logging.DEBUG)

STDIO           = "-"

# Separators are awkward to type on a command line, so we understand a
# few backslash escapes.
SEPARATOR_ESCAPES = (
    ("\\r", "\r"),
    ("\\n", "\n"),
    ("\\t", "\t"),
)

def unescape_separator (value):
    for escaped, actual in SEPARATOR_ESCAPES:
        value = value.replace(escaped, actual)

    return value

def build_parser ():
    parser  = argparse.ArgumentParser(
            prog="a85codec",
            description="Convert between binary data and Ascii85 text.")

    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="log more (repeat for debug output)")

    commands = parser.add_subparsers(dest="command", required=True)

    encoder = commands.add_parser("encode", help="encode bytes as Ascii85")
    encoder.add_argument("input", nargs="?", default=STDIO,
                         help="file to encode (default: stdin)")
    encoder.add_argument("-o", "--output", default=STDIO,
                         help="where to write the text (default: stdout)")
    encoder.add_argument("-w", "--wrap", type=int,
                         default=DEFAULT_LINE_LENGTH,
                         help="characters per line; 0 disables wrapping"
                              " (default: %(default)s)")
    encoder.add_argument("-s", "--separator", type=unescape_separator,
                         default=DEFAULT_WRAP_SEPARATOR,
                         help="text to put between lines (default: \\n)")

    decoder = commands.add_parser("decode", help="decode Ascii85 to bytes")
    decoder.add_argument("input", nargs="?", default=STDIO,
                         help="file to decode (default: stdin)")
    decoder.add_argument("-o", "--output", default=STDIO,
                         help="where to write the bytes (default: stdout)")

    return parser

def log_level (verbosity):
    """Map a count of `-v` flags onto a logging level."""
    return LOG_LEVELS[min(verbosity, len(LOG_LEVELS) - 1)]

def configure_logging (verbosity):
    logging.basicConfig(format=LOG_FORMAT, level=log_level(verbosity))

def read_input (path):
    if path == STDIO:
        return sys.stdin.buffer.read()

    return read_bytes(path)

def run_encode (args):
    text    = encode(read_input(args.input), args.wrap, args.separator)

    if args.output == STDIO:
        sys.stdout.write(text)
    else:
        write_text(args.output, text)

def run_decode (args):
    data    = decode(read_input(args.input))

    if args.output == STDIO:
        sys.stdout.buffer.write(data)
    else:
        write_bytes(args.output, data)

COMMANDS = {
    "encode":   run_encode,
    "decode":   run_decode,
}

def main (argv = None):
    """Run the command line tool and return an exit status."""
    args    = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        COMMANDS[args.command](args)

    except (A85BaseError, OSError) as error:
        # Unreadable files get the same treatment as malformed input.
        logger.debug("%s failed", args.command, exc_info=True)
        print("a85codec: {}".format(error), file=sys.stderr)
        return 1

    return 0
