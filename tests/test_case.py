import unittest
from unittest import mock

from turbotext import flags, to_lower, to_upper, ucfirst, ucwords


class CaseCases:
    def test_to_upper(self):
        assert to_upper("héllo") == "HÉLLO"
        assert to_upper("čaj šećer đak") == "ČAJ ŠEĆER ĐAK"
        assert to_upper("москва") == "МОСКВА"

    def test_to_lower(self):
        assert to_lower("HÉLLO") == "héllo"
        assert to_lower("ŠČĆŽĐ") == "ščćžđ"

    def test_final_sigma_lowers_to_sigma(self):
        assert to_lower("Σ") == "σ"

    def test_dotless_i_uppercases(self):
        assert to_upper("ı") == "I"
        assert to_lower("I") == "i"

    def test_bytes(self):
        assert to_upper(b"\xc3\xa9") == b"\xc3\x89"

    def test_ucfirst(self):
        assert ucfirst("éclair") == "Éclair"
        assert ucfirst("é") == "É"
        assert ucfirst("") == ""
        assert ucfirst("ábc DEF") == "Ábc DEF"

    def test_ucwords(self):
        assert ucwords("čaj i kafa") == "Čaj I Kafa"
        assert ucwords("  ñu\tébano") == "  Ñu\tÉbano"

    def test_ucwords_keeps_multibyte_characters_whole(self):
        text = "ђак\nшећер\x0bжир ёж"
        result = ucwords(text)
        assert result == "Ђак\nШећер\x0bЖир Ёж"
        result.encode("utf-8")
        assert len(result) == len(text)


class TestNativeCase(CaseCases, unittest.TestCase):
    pass


class TestFallbackCase(CaseCases, unittest.TestCase):
    def setUp(self):
        patcher = mock.patch.object(flags, "NATIVE_MULTIBYTE", False)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_unmapped_characters_pass_through(self):
        assert to_upper("東京 123") == "東京 123"
        assert to_lower("東京 ABC") == "東京 abc"


if __name__ == "__main__":
    unittest.main()
