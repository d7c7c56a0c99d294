# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
import logging

from .exceptions            import  InvalidConfiguration
from .internal              import  split_groups
from .internal.alphabet     import  Z_CHAR, GROUP_BYTES, digit_to_char, \
                                    value_digits

logger = logging.getLogger(__name__)

DEFAULT_LINE_LENGTH     = 76
DEFAULT_WRAP_SEPARATOR  = "\n"

def encode_group (group):
    """Encode between one and four bytes as Ascii85 characters.

    A full group of four zero bytes comes out as `z`. Anything shorter
    is padded with zeroes, expanded like normal, and then cut down to
    one more character than it had bytes.

        >>> encode_group(b"Man ")
        '9jqo^'
        >>> encode_group(b"M")
        '9`'
    """
    missing = GROUP_BYTES - len(group)
    total   = int.from_bytes(bytes(group) + bytes(missing), "big")

    if missing == 0 and total == 0:
        # The shorthand only applies to full groups.
        return Z_CHAR

    five    = "".join(digit_to_char(d) for d in value_digits(total))

    return five[:GROUP_BYTES + 1 - missing]

def wrap_lines (text, max_line_length, wrap_separator):
    """Put a separator after every `max_line_length` characters.

    This works on the finished text and knows nothing about groups, so
    a separator can land in the middle of one. A separator also follows
    the final line if that line is full.

        >>> wrap_lines("abcdefg", 3, "|")
        'abc|def|g'
        >>> wrap_lines("abcdef", 3, "|")
        'abc|def|'
    """
    if max_line_length == 0:
        return text

    lines   = [ ]
    for i in range(0, len(text), max_line_length):
        line    = text[i:i+max_line_length]

        if len(line) == max_line_length:
            line   += wrap_separator

        lines.append(line)

    return "".join(lines)

def check_options (max_line_length, wrap_separator):
    if isinstance(max_line_length, bool)        \
            or not isinstance(max_line_length, int) \
            or max_line_length < 0:
        raise InvalidConfiguration("max_line_length",
                                   "a non-negative integer",
                                   max_line_length)

    if not isinstance(wrap_separator, str):
        raise InvalidConfiguration("wrap_separator",
                                   "a string",
                                   wrap_separator)

def encode (message,
            max_line_length = DEFAULT_LINE_LENGTH,
            wrap_separator = DEFAULT_WRAP_SEPARATOR):
    """Encode bytes as Ascii85 text.

    Args:
        message (bytes-like):   The raw data to encode.

        max_line_length (int):  How many characters to allow on a line
                                before inserting `wrap_separator`. Zero
                                turns wrapping off. Defaults to 76.

        wrap_separator (str):   What to insert between lines. Defaults
                                to a newline.

    Returns:
        str:                    The encoded text.

    Raises:
        InvalidConfiguration:   If either option is unusable. This is
                                checked before anything is encoded.

    Examples:
        >>> encode(b"Man ")
        '9jqo^'
        >>> encode(bytes(4))
        'z'
        >>> encode(b"Man is", max_line_length=3)
        '9jq\\no^B\\nla'

    """
    check_options(max_line_length, wrap_separator)

    if isinstance(message, str):
        raise TypeError("expected a bytes-like object, not str")

    message = bytes(message)

    if not message:
        return ""

    groups, final_group = split_groups(GROUP_BYTES, message)

    logger.debug("encoding %d full groups and %d trailing bytes",
                 len(groups), len(final_group))

    pieces  = [encode_group(group) for group in groups]

    if final_group:
        pieces.append(encode_group(final_group))

    return wrap_lines("".join(pieces), max_line_length, wrap_separator)
