# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from hamcrest.core.base_matcher import BaseMatcher

from a85codec import encode, decode
from a85codec.decoder import strip_whitespace

class round_trips (BaseMatcher):
    """Matches bytes that come back unchanged from encode and decode."""

    def __init__ (self, **options):
        self.options = options

    def _matches (self, item):
        return self.__round_trip(item) == item

    def describe_to (self, description):
        description.append_text("bytes surviving a round trip with ") \
                .append_description_of(self.options)

    def describe_mismatch (self, item, description):
        description.append_text("came back as ") \
                .append_description_of(self.__round_trip(item))

    def __round_trip (self, item):
        text = encode(item, **self.options)
        return decode(strip_whitespace(text))

class decodes_to (BaseMatcher):

    def __init__ (self, expected):
        self.expected = expected

    def _matches (self, item):
        return decode(item) == self.expected

    def describe_to (self, description):
        description.append_text("text decoding to ") \
                .append_description_of(self.expected)

    def describe_mismatch (self, item, description):
        description.append_text("decoded to ") \
                .append_description_of(decode(item))
