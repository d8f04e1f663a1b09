"""Character-counted indexing, run against both the native and fallback paths."""

import unittest
from unittest import mock

from turbotext import basename, correct_index, find, length, ltrim, rtrim, substr, substr_replace, trim
from turbotext import flags
from turbotext.index import REPEAT_CEILING


class IndexCases:
    def test_length(self):
        assert length("héllo") == 5
        assert length("") == 0
        assert length("東京😀") == 3
        assert length(b"h\xc3\xa9") == 2

    def test_substr_multibyte(self):
        assert substr("héllo", 1, 3) == "éll"

    def test_substr_to_end(self):
        assert substr("héllo", 1) == "éllo"
        assert substr("héllo", 0) == "héllo"

    def test_substr_negative_offset(self):
        assert substr("héllo", -3) == "llo"
        assert substr("héllo", -2, 1) == "l"
        assert substr("héllo", -10, 2) == "hé"

    def test_substr_negative_length(self):
        assert substr("héllo", 1, -1) == "éll"
        assert substr("Москва", 0, -2) == "Моск"

    def test_substr_empty_results(self):
        assert substr("héllo", 0, 0) == ""
        assert substr("héllo", 10) == ""
        assert substr("héllo", 10, 2) == ""
        assert substr("héllo", 2, -10) == ""

    def test_substr_bytes_in_bytes_out(self):
        assert substr(b"h\xc3\xa9llo", 1, 1) == b"\xc3\xa9"

    def test_substr_never_splits_characters(self):
        text = "ж" * 7
        for offset in range(-8, 9):
            for count in (None, 0, 1, 3, -1, -3):
                part = substr(text, offset, count)
                assert set(part) <= {"ж"}

    def test_substr_replace(self):
        assert substr_replace("héllo", "EE", 1, 2) == "hEElo"
        assert substr_replace("héllo", "X", 0, 1) == "Xéllo"
        assert substr_replace("héllo", "!", 5) == "héllo!"

    def test_find(self):
        assert find("héllo wörld", "wö") == 6
        assert find("héllo", "z") == -1
        assert find("", "a") == -1

    def test_find_with_offset(self):
        assert find("éaéa", "a") == 1
        assert find("éaéa", "a", 2) == 3
        assert find("éaéa", "a", 4) == -1


class TestNativeIndex(IndexCases, unittest.TestCase):
    pass


class TestFallbackIndex(IndexCases, unittest.TestCase):
    def setUp(self):
        patcher = mock.patch.object(flags, "NATIVE_MULTIBYTE", False)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_long_input_beyond_repeat_ceiling(self):
        text = "é" * (REPEAT_CEILING + 10)
        assert length(text) == REPEAT_CEILING + 10
        assert substr(text, REPEAT_CEILING + 5) == "é" * 5
        assert substr(text, 1, REPEAT_CEILING + 2) == "é" * (REPEAT_CEILING + 2)


class TestCorrectIndex(unittest.TestCase):
    def setUp(self):
        # "€" is three bytes starting at byte 5
        self.text = "abcde€f"

    def test_round_back(self):
        assert correct_index(self.text, 6) == 5
        assert correct_index(self.text, 7) == 5

    def test_round_forward(self):
        assert correct_index(self.text, 6, True) == 8
        assert correct_index(self.text, 7, round_to_next=True) == 8

    def test_boundary_unchanged(self):
        assert correct_index(self.text, 5) == 5
        assert correct_index(self.text, 8, True) == 8

    def test_clamped(self):
        assert correct_index(self.text, -1) == 0
        assert correct_index(self.text, 100) == 9


class TestTrim(unittest.TestCase):
    def test_default_whitespace(self):
        assert trim("  héllo \n") == "héllo"
        assert ltrim("\t\x00x ") == "x "
        assert rtrim(" x\r\n") == " x"

    def test_multibyte_chars(self):
        assert ltrim("ééabé", "é") == "abé"
        assert rtrim("abéé", "é") == "ab"
        assert trim("xéyx", "x") == "éy"
        assert trim("→·a·→", "→·") == "a"

    def test_nothing_to_strip(self):
        assert trim("abc", "") == "abc"
        assert ltrim("abc", "z") == "abc"


class TestBasename(unittest.TestCase):
    def test_both_separators(self):
        assert basename("dir/sub/fajl.txt") == "fajl.txt"
        assert basename("C:\\Dokumenti\\izveštaj.pdf") == "izveštaj.pdf"

    def test_trailing_separator_ignored(self):
        assert basename("/var/ђаци/") == "ђаци"

    def test_no_separator(self):
        assert basename("čaj") == "čaj"

    def test_suffix(self):
        assert basename("/tmp/шећер.txt", ".txt") == "шећер"
        assert basename("/tmp/a.txt", ".pdf") == "a.txt"

    def test_bytes(self):
        assert basename(b"a/b\\c") == b"c"


if __name__ == "__main__":
    unittest.main()
