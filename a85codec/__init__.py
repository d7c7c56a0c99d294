# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from .decoder       import decode
from .encoder       import encode, DEFAULT_LINE_LENGTH, \
                           DEFAULT_WRAP_SEPARATOR
from .exceptions    import A85BaseError, InvalidConfiguration, \
                           A85DecodeError, InvalidCharacter, TruncatedInput

__all__ = [
    "encode",
    "decode",
    "DEFAULT_LINE_LENGTH",
    "DEFAULT_WRAP_SEPARATOR",

    # Exceptions
    "A85BaseError",
    "InvalidConfiguration",
    "A85DecodeError",
    "InvalidCharacter",
    "TruncatedInput",
]
