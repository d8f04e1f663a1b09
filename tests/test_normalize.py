"""Tests for deaccenting, special-character stripping, romanization and slugs."""

import unittest

from turbotext import Case, deaccent, romanize, slugify, strip_specials


class TestDeaccent(unittest.TestCase):
    def test_lowercase(self):
        assert deaccent("café") == "cafe"
        assert deaccent("straße") == "strasse"

    def test_both_cases_by_default(self):
        assert deaccent("Čaj Ÿes ÿes") == "Caj Yes yes"

    def test_lower_only(self):
        assert deaccent("Éé", Case.LOWER) == "Ée"

    def test_upper_only(self):
        assert deaccent("Éé", case=Case.UPPER) == "Eé"

    def test_untouched_text(self):
        assert deaccent("plain 東京") == "plain 東京"

    def test_bytes(self):
        assert deaccent("café".encode("utf-8")) == b"cafe"


class TestStripSpecials(unittest.TestCase):
    def test_punctuation_and_spaces_removed(self):
        assert strip_specials("Hello, World!") == "HelloWorld"

    def test_replacement(self):
        assert strip_specials("Hello, World!", "_") == "Hello__World_"

    def test_kept_characters(self):
        assert strip_specials("a-b_c:d.e*f") == "a-b_c:d.e*f"

    def test_control_characters(self):
        assert strip_specials("a\x01b\tc\x1fd") == "abcd"

    def test_multibyte_specials(self):
        assert strip_specials("a…b€c«d»") == "abcd"
        assert strip_specials("ж—ж") == "жж"

    def test_letters_survive(self):
        assert strip_specials("čćžšđ Москва") == "čćžšđМосква"

    def test_extra_characters(self):
        assert strip_specials("a*b", extra="*") == "ab"
        assert strip_specials("a.bжc", "", "ж.") == "abc"


class TestRomanize(unittest.TestCase):
    def test_russian(self):
        assert romanize("Москва") == "Moskva"

    def test_ascii_returned_unchanged(self):
        assert romanize("plain text") == "plain text"
        assert romanize(b"plain") == b"plain"

    def test_greek(self):
        assert romanize("Σ θ π") == "S th p"

    def test_clusters_match_longest_first(self):
        assert romanize("きゃ") == "kya"
        assert romanize("っきゃ") == "kkya"
        assert romanize("き") == "ki"


class TestSlugify(unittest.TestCase):
    def test_basic(self):
        assert slugify("Čaj & Kafa / Dobro") == "caj-kafa-dobro"

    def test_quotes_and_dots_dropped(self):
        assert slugify("It's a \"test\".") == "its-a-test"

    def test_separators_collapse(self):
        assert slugify("a -- b ?? c") == "a-b-c"

    def test_outer_whitespace_becomes_separator(self):
        assert slugify("  Straße  ") == "-strasse-"


if __name__ == "__main__":
    unittest.main()
