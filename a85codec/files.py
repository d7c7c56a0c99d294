# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
import logging

from .decoder   import  decode
from .encoder   import  encode, DEFAULT_LINE_LENGTH, DEFAULT_WRAP_SEPARATOR

logger = logging.getLogger(__name__)

def read_bytes (path):
    with open(path, "rb") as the_file:
        result = the_file.read()

    logger.info("read %d bytes from %s", len(result), path)
    return result

def write_bytes (path, data):
    with open(path, "wb") as the_file:
        the_file.write(data)

    logger.info("wrote %d bytes to %s", len(data), path)

def write_text (path, text):
    # Ascii85 is pure ASCII, and we don't want the platform messing with
    # whatever line separator was asked for.
    with open(path, "w", encoding="ascii", newline="") as the_file:
        the_file.write(text)

    logger.info("wrote %d characters to %s", len(text), path)

def encode_file (path,
                 max_line_length = DEFAULT_LINE_LENGTH,
                 wrap_separator = DEFAULT_WRAP_SEPARATOR):
    """Read an entire file and return its Ascii85 encoding."""
    return encode(read_bytes(path), max_line_length, wrap_separator)

def decode_file (path):
    """Read an entire Ascii85 text file and return the decoded bytes.

    The file is read as raw bytes, so a stray non-ASCII byte is reported
    the same way as any other invalid character.
    """
    return decode(read_bytes(path))
