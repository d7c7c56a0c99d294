# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
import logging
from collections            import  namedtuple
from re                     import  compile as re_compile

from .exceptions            import  InvalidCharacter, TruncatedInput
from .internal.alphabet     import  Z_CHAR, FOUR_ZEROES, GROUP_BYTES,   \
                                    GROUP_CHARS, GROUP_MASK, HIGHEST,   \
                                    group_value, is_valid_group

logger = logging.getLogger(__name__)

re_whitespace   = re_compile(r"[ \t\r\n]")

class FullGroup (namedtuple("FullGroup", ("position", "chars"))):
    """Five digits standing for four bytes."""

    def to_bytes (self):
        total   = group_value(self.chars) & GROUP_MASK
        return total.to_bytes(GROUP_BYTES, "big")

class ZeroShorthand (namedtuple("ZeroShorthand", ("position",))):
    """A lone `z` standing for four zero bytes."""

    def to_bytes (self):
        return FOUR_ZEROES

class ShortGroup (namedtuple("ShortGroup", ("position", "chars"))):
    """The two to four digits left over at the very end."""

    def to_bytes (self):
        # The encoder padded with zero bytes and then threw away the
        # low digits. Padding with our highest digit instead rounds the
        # value back up into the right range before we cut it down.
        missing = GROUP_CHARS - len(self.chars)
        padded  = self.chars + chr(HIGHEST) * missing
        total   = group_value(padded) & GROUP_MASK

        return total.to_bytes(GROUP_BYTES, "big")[:len(self.chars) - 1]

def strip_whitespace (text):
    """Remove spaces, tabs, and line breaks."""
    return re_whitespace.sub("", text)

def check_group (chars, position):
    if not is_valid_group(chars):
        raise InvalidCharacter(chars, position)

def scan_groups (cleaned):
    """Walk whitespace-free Ascii85 text one group at a time.

    We can't just chop the text into fives, since `z` takes up a single
    character but stands in for a whole group. Instead, we keep a cursor
    and decide what to do based on whatever it's pointing at.

    Args:
        cleaned (str):      Encoded text with no whitespace in it.

    Yields:
        FullGroup, ZeroShorthand, or ShortGroup, in order.

    Raises:
        InvalidCharacter:   If a group contains anything outside of
                            `!` through `u`.

        TruncatedInput:     If a single character is left at the end.

    """
    position    = 0
    length      = len(cleaned)

    while length - position >= GROUP_CHARS:
        if cleaned[position] == Z_CHAR:
            yield ZeroShorthand(position)
            position   += 1
            continue

        chars       = cleaned[position:position + GROUP_CHARS]
        check_group(chars, position)

        yield FullGroup(position, chars)
        position   += GROUP_CHARS

    # We have fewer than five characters left, so anything here is the
    # final partial group. It may still start with shorthand zeroes.
    while position < length and cleaned[position] == Z_CHAR:
        yield ZeroShorthand(position)
        position   += 1

    remaining   = length - position

    if remaining == 0:
        return

    if remaining == 1:
        # One digit isn't enough to describe even a single byte.
        raise TruncatedInput(position)

    chars       = cleaned[position:]
    check_group(chars, position)

    yield ShortGroup(position, chars)

def decode (text):
    """Decode Ascii85 text back into bytes.

    Args:
        text (str or bytes):    The encoded text. Whitespace anywhere in
                                it is ignored.

    Returns:
        bytes:                  The decoded data.

    Raises:
        InvalidCharacter:       If any group has a character outside of
                                the alphabet.

        TruncatedInput:         If the text ends with a lone character.

    Examples:
        >>> decode("9jqo^")
        b'Man '
        >>> decode("z")
        b'\\x00\\x00\\x00\\x00'
        >>> decode("9jq\\no^B\\nla")
        b'Man is'

    """
    if isinstance(text, (bytes, bytearray, memoryview)):
        # Latin-1 maps every byte to a character, so anything that isn't
        # ASCII will show up later as an invalid character.
        text    = bytes(text).decode("latin_1")

    elif not isinstance(text, str):
        raise TypeError("expected str or bytes, not {}".format(
                        type(text).__name__))

    cleaned = strip_whitespace(text)

    if not cleaned:
        return b""

    steps   = list(scan_groups(cleaned))

    logger.debug("decoding %d groups from %d characters",
                 len(steps), len(cleaned))

    return b"".join(step.to_bytes() for step in steps)
