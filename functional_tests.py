# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from os.path import join
from random import randrange
from tempfile import TemporaryDirectory
import unittest

from a85codec import encode, decode, InvalidCharacter, TruncatedInput
from a85codec.cli import main

class TestAscii85 (unittest.TestCase):

    def test_can_embed_binary_in_text_and_get_it_back (self):
        # Christopher wants to paste a small binary blob into a
        # PostScript file, so he needs it as printable text. He starts
        # with something easy to check by eye.
        self.assertEqual(encode(b"Man "), "9jqo^")

        # He knows his data has long runs of zeroes, and he's pleased to
        # see they shrink down to a single `z` apiece.
        self.assertEqual(encode(bytes(8)), "zz")

        # His real blob is a few hundred bytes of noise, and its length
        # isn't a multiple of four.
        blob = bytes(randrange(0x100) for i in range(301))
        text = encode(blob)

        # Every line but the last is exactly 76 characters wide.
        lines = text.split("\n")
        for line in lines[:-1]:
            self.assertEqual(len(line), 76)

        self.assertLessEqual(len(lines[-1]), 76)

        # When he decodes it, he gets his blob back exactly.
        self.assertEqual(decode(text), blob)

        # His editor reindents the text with tabs and spaces. That
        # doesn't bother the decoder at all.
        mangled = "\t" + text.replace("\n", "\n    ")
        self.assertEqual(decode(mangled), blob)

        # Then he fat-fingers a `~` into the middle of it. The decoder
        # refuses and tells him where.
        broken = text[:10] + "~" + text[11:]
        with self.assertRaises(InvalidCharacter) as caught:
            decode(broken)

        self.assertEqual(caught.exception.position, 10)

        # He also notices that chopping the text off after a single
        # character of the final group is reported as truncated.
        with self.assertRaises(TruncatedInput):
            decode("9jqo^9")

        # Satisfied, he moves on.

    def test_can_round_trip_files_from_the_command_line (self):
        # Christopher would rather not write any Python, so he reaches
        # for the command line tool instead.
        with TemporaryDirectory() as tmp:
            original    = join(tmp, "blob.bin")
            encoded     = join(tmp, "blob.a85")
            restored    = join(tmp, "blob.out")

            data = bytes(range(256)) * 3
            with open(original, "wb") as f:
                f.write(data)

            # He encodes with short lines so it fits in a narrow column.
            self.assertEqual(main(["encode", original, "-o", encoded,
                                   "-w", "40"]), 0)

            with open(encoded) as f:
                for line in f.read().splitlines():
                    self.assertLessEqual(len(line), 40)

            # And then turns it back into bytes.
            self.assertEqual(main(["decode", encoded, "-o", restored]), 0)

            with open(restored, "rb") as f:
                self.assertEqual(f.read(), data)

if __name__ == "__main__":
    unittest.main()
