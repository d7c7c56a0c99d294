# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.

def split_groups (size, sequence):
    """Split a sliceable sequence into consecutive groups.

    Args:
        size (int):             The length of each full group.

        sequence (Sequence):    Anything that can be sliced and measured,
                                like bytes or a string.

    Returns:
        tuple:                  A two-tuple. The first item is a list of
                                full groups; the second is whatever is
                                left over at the end (possibly empty).

    Examples:
        >>> split_groups(4, b"abcdefghij")
        ([b'abcd', b'efgh'], b'ij')

        If everything fits, the tail is empty.

        >>> split_groups(2, "abcd")
        (['ab', 'cd'], '')

    """

    # Figure out where the last full group ends.
    even_last   = len(sequence) - len(sequence) % size

    groups      = [sequence[i:i+size] for i in range(0, even_last, size)]

    return groups, sequence[even_last:]
