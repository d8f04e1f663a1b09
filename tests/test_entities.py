import unittest

from turbotext import from_html_entities, to_html_entities


class TestToHtmlEntities(unittest.TestCase):
    def test_decimal_below_256_hex_above(self):
        assert to_html_entities("aé€") == "a&#233;&#x20ac;"

    def test_ascii_untouched(self):
        assert to_html_entities("<b>&</b>") == "<b>&</b>"

    def test_astral(self):
        assert to_html_entities("😀") == "&#x1f600;"

    def test_bytes(self):
        assert to_html_entities(b"\xd0\x96") == b"&#x416;"


class TestFromHtmlEntities(unittest.TestCase):
    def test_numeric(self):
        assert from_html_entities("&#233;&#x20AC;&#X41;&#x1f600;") == "é€A😀"

    def test_named_left_alone_by_default(self):
        assert from_html_entities("&eacute;&amp;") == "&eacute;&amp;"

    def test_named(self):
        assert from_html_entities("&eacute; &amp; &hellip; &#38;", decode_named=True) == "é & … &"

    def test_unknown_name_kept(self):
        assert from_html_entities("&bogus; &apos;", decode_named=True) == "&bogus; &apos;"

    def test_no_double_decoding(self):
        assert from_html_entities("&amp;#38;", decode_named=True) == "&#38;"
        assert from_html_entities("&#38;amp;", decode_named=True) == "&amp;"

    def test_invalid_codepoints_replaced(self):
        assert from_html_entities("&#xD800;") == "�"
        assert from_html_entities("&#1114112;") == "�"

    def test_incomplete_references_kept(self):
        assert from_html_entities("&#233 &#x; &;") == "&#233 &#x; &;"

    def test_round_trip(self):
        text = "Њива, café, 東京, 😀"
        assert from_html_entities(to_html_entities(text)) == text


if __name__ == "__main__":
    unittest.main()
