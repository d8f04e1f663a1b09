import unittest
from unittest import mock

from turbotext import CodepointOutOfRange, flags, from_utf16be, to_utf16be


class Utf16Cases:
    def test_to_utf16be(self):
        assert to_utf16be("Aé") == b"\x00A\x00\xe9"
        assert to_utf16be(b"\xd0\x96") == b"\x04\x16"

    def test_bom(self):
        assert to_utf16be("A", bom=True) == b"\xfe\xff\x00A"
        assert to_utf16be("", True) == b"\xfe\xff"

    def test_from_utf16be(self):
        assert from_utf16be(b"\x00A\x00\xe9") == "Aé".encode("utf-8")

    def test_bom_and_odd_byte_dropped(self):
        assert from_utf16be(b"\xfe\xff\x00A\x00") == b"A"

    def test_round_trip(self):
        for text in ["", "plain", "Њива и љубав", "東京"]:
            assert from_utf16be(to_utf16be(text)) == text.encode("utf-8")


class TestNativeUtf16(Utf16Cases, unittest.TestCase):
    def test_surrogate_pairs(self):
        assert to_utf16be("😀") == b"\xd8\x3d\xde\x00"
        assert from_utf16be(b"\xd8\x3d\xde\x00") == "😀".encode("utf-8")


class TestFallbackUtf16(Utf16Cases, unittest.TestCase):
    def setUp(self):
        patcher = mock.patch.object(flags, "NATIVE_MULTIBYTE", False)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_astral_rejected(self):
        with self.assertRaises(CodepointOutOfRange) as ctx:
            to_utf16be("a😀")
        assert ctx.exception.offset == 1
        assert ctx.exception.value == 0x1F600

    def test_surrogates_dropped(self):
        assert from_utf16be(b"\xd8\x00\x00A") == b"A"
        assert from_utf16be(b"\xd8\x3d\xde\x00") == b""


if __name__ == "__main__":
    unittest.main()
