# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.

# We're in base 85, and our "zero" digit is `!`.
BASE            = 85
ZERO            = ord("!")
HIGHEST         = ord("u")

# `z` stands in for a whole group of four zero bytes. It's only ever
# valid where a group would begin.
Z_CHAR          = "z"
FOUR_ZEROES     = bytes(4)

GROUP_BYTES     = 4
GROUP_CHARS     = 5

# Place values for each digit in a group, most significant first.
MULTIPLIERS     = (BASE**4, BASE**3, BASE**2, BASE, 1)

# Groups are written back out as exactly four bytes.
GROUP_MASK      = 0xffffffff

def is_valid_char (char):
    """True if the character is one of the 85 digits."""
    return ZERO <= ord(char) <= HIGHEST

def is_valid_group (chars):
    return all(is_valid_char(c) for c in chars)

def digit_to_char (digit):
    return chr(digit + ZERO)

def group_value (chars):
    """Add up a group of five characters as a base-85 number.

    Python integers don't overflow, so the total can be anything from 0
    to 85**5 - 1 regardless of how large the intermediate products get.
    """
    total   = 0
    for multiplier, char in zip(MULTIPLIERS, chars):
        total  += multiplier * (ord(char) - ZERO)

    return total

def value_digits (total):
    """Expand a 32-bit value into five base-85 digits, highest first."""
    return [total // multiplier % BASE for multiplier in MULTIPLIERS]
