# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from hamcrest import *
import unittest

from a85codec.internal import split_groups
from a85codec.internal.alphabet import BASE, ZERO, HIGHEST, MULTIPLIERS, \
        is_valid_char, is_valid_group, digit_to_char, group_value, \
        value_digits

class TestAlphabet (unittest.TestCase):

    def test_alphabet_has_eighty_five_digits (self):
        assert_that(HIGHEST - ZERO + 1, is_(equal_to(BASE)))

    def test_multipliers (self):
        assert_that(MULTIPLIERS, is_(equal_to(
                (52200625, 614125, 7225, 85, 1))))

    def test_bounds_are_valid (self):
        assert_that(is_valid_char("!"), is_(equal_to(True)))
        assert_that(is_valid_char("u"), is_(equal_to(True)))

    def test_neighbors_are_invalid (self):
        for char in (" ", "v", "z", "~", "\xe9"):
            assert_that(is_valid_char(char), is_(equal_to(False)))

    def test_group_validity (self):
        assert_that(is_valid_group("9jqo^"), is_(equal_to(True)))
        assert_that(is_valid_group("9jqoz"), is_(equal_to(False)))

    def test_digits (self):
        assert_that(digit_to_char(0), is_(equal_to("!")))
        assert_that(digit_to_char(84), is_(equal_to("u")))

    def test_group_value (self):
        assert_that(group_value("!!!!!"), is_(equal_to(0)))
        assert_that(group_value("s8W-!"), is_(equal_to(0xffffffff)))
        assert_that(group_value("uuuuu"), is_(equal_to(85**5 - 1)))

    def test_value_digits (self):
        assert_that(value_digits(0), is_(equal_to([0, 0, 0, 0, 0])))
        assert_that(value_digits(0xffffffff),
                    is_(equal_to([82, 23, 54, 12, 0])))

class TestSplitGroups (unittest.TestCase):

    def test_even_split (self):
        assert_that(split_groups(4, b"abcdefgh"),
                    is_(equal_to(([b"abcd", b"efgh"], b""))))

    def test_short_tail (self):
        assert_that(split_groups(4, b"abcdefghij"),
                    is_(equal_to(([b"abcd", b"efgh"], b"ij"))))

    def test_only_a_tail (self):
        assert_that(split_groups(4, b"ab"), is_(equal_to(([], b"ab"))))

    def test_empty (self):
        assert_that(split_groups(5, ""), is_(equal_to(([], ""))))

if __name__ == "__main__":
    unittest.main()
