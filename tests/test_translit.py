"""Tests for Serbian Cyrillic <-> Latin transliteration."""

import unittest

from turbotext import Direction, transliterate, transliterate_for_locale


class TestToCyrillic(unittest.TestCase):
    def test_lowercase_and_digraphs(self):
        assert transliterate("njiva i ljubav", Direction.TO_CYRILLIC) == "њива и љубав"
        assert transliterate("džep", Direction.TO_CYRILLIC) == "џеп"

    def test_title_case_digraphs(self):
        assert transliterate("Njegoš", Direction.TO_CYRILLIC) == "Његош"
        assert transliterate("Ljubav", Direction.TO_CYRILLIC) == "Љубав"
        assert transliterate("Džep", Direction.TO_CYRILLIC) == "Џеп"

    def test_all_caps_digraphs(self):
        assert transliterate("LJUBAV", Direction.TO_CYRILLIC) == "ЉУБАВ"
        assert transliterate("DŽEP i NJIVA", Direction.TO_CYRILLIC) == "ЏЕП и ЊИВА"

    def test_caps_digraph_before_lowercase(self):
        assert transliterate("LJubav", Direction.TO_CYRILLIC) == "Љубав"
        assert transliterate("NJiva i DŽep", Direction.TO_CYRILLIC) == "Њива и Џеп"

    def test_placeholders_survive(self):
        assert transliterate("Ima %s stavki", Direction.TO_CYRILLIC) == "Има %s ставки"
        assert transliterate("%d dana", Direction.TO_CYRILLIC) == "%d дана"

    def test_positional_placeholders_repaired(self):
        assert transliterate("%1$s i %2$s", Direction.TO_CYRILLIC) == "%1$s и %2$s"

    def test_markup_preserved(self):
        text = '<b class="x">tekst</b> a&nbsp;b &#38; <img alt="slika" src="a.png">'
        expected = '<b class="x">текст</b> а&nbsp;б &#38; <img alt="слика" src="a.png">'
        assert transliterate(text, Direction.TO_CYRILLIC) == expected

    def test_markup_disabled(self):
        assert transliterate("<b>tekst</b>", Direction.TO_CYRILLIC, markup=False) == "<б>текст</б>"

    def test_cyrillic_and_other_text_untouched(self):
        assert transliterate("текст 123 東京", Direction.TO_CYRILLIC) == "текст 123 東京"


class TestToLatin(unittest.TestCase):
    def test_lowercase(self):
        assert transliterate("њива и љубав", Direction.TO_LATIN) == "njiva i ljubav"

    def test_title_case(self):
        assert transliterate("Његош", Direction.TO_LATIN) == "Njegoš"
        assert transliterate("Љубав", Direction.TO_LATIN) == "Ljubav"

    def test_all_caps(self):
        assert transliterate("ЉУБАВ и ЏЕП", Direction.TO_LATIN) == "LJUBAV i DŽEP"

    def test_markup_preserved(self):
        text = '<a title="Наслов">текст</a>'
        assert transliterate(text, Direction.TO_LATIN) == '<a title="Naslov">tekst</a>'

    def test_bytes_in_bytes_out(self):
        assert transliterate("текст".encode("utf-8"), Direction.TO_LATIN) == b"tekst"

    def test_direction_by_locale_value(self):
        assert transliterate("текст", "sr-Latn") == "tekst"

    def test_unknown_direction(self):
        with self.assertRaises(ValueError):
            transliterate("текст", "en")

    def test_round_trip(self):
        for text in ["Njegoš i ljubav", "LJUBAV", "Đak, šećer, žir, čaj"]:
            cyrillic = transliterate(text, Direction.TO_CYRILLIC)
            assert transliterate(cyrillic, Direction.TO_LATIN) == text


class TestLocale(unittest.TestCase):
    def test_cyrillic_locale(self):
        assert transliterate_for_locale("tekst", "sr-Cyrl") == "текст"

    def test_latin_locale(self):
        assert transliterate_for_locale("текст", "sr-Latn") == "tekst"

    def test_other_locale_unchanged(self):
        assert transliterate_for_locale("tekst", "en") == "tekst"

    def test_locale_variant_is_plain(self):
        assert transliterate_for_locale("<b>tekst</b>", "sr-Cyrl") == "<б>текст</б>"


if __name__ == "__main__":
    unittest.main()
