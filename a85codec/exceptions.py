# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.

class A85BaseError (Exception):
    """Root for all a85codec errors.

    Note:
        This is meant to never be raised directly. Only its descendents
        will be raised; this is meant only to be caught.

    Examples:
        Every child exception uses its docstring as a message template,
        filled in with whatever arguments it was raised with.

        >>> class MyCodecError (A85BaseError):
        ...     '''Something went wrong with {!r}.'''
        ...     pass
        ...
        >>> str(MyCodecError("abc"))
        "Something went wrong with 'abc'."
        >>> MyCodecError("abc")
        MyCodecError("Something went wrong with 'abc'.")

    """

    def __repr__ (self):
        return "{}({})".format(self.__class__.__name__, repr(str(self)))

    def __str__ (self):
        return self.__doc__.format(*self.args)

class InvalidConfiguration (A85BaseError):
    """Option {} must be {}; got {!r}"""

    def __init__ (self, option, expected, value):
        super().__init__(option, expected, value)
        self.option     = option
        self.value      = value

class A85DecodeError (A85BaseError):
    """Catch-all for decode errors."""
    pass

class InvalidCharacter (A85DecodeError):
    """Invalid character in group {!r} at offset {:d}"""

    def __init__ (self, group, position):
        super().__init__(group, position)
        self.group      = group
        self.position   = position

class TruncatedInput (A85DecodeError):
    """Lone trailing character at offset {:d} cannot encode a byte"""

    def __init__ (self, position):
        super().__init__(position)
        self.position   = position
