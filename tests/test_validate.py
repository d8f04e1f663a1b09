import unittest

from turbotext import bad_byte_repair, check, is_ascii, strip


class TestValidate(unittest.TestCase):
    def test_is_ascii(self):
        assert is_ascii("plain text\n") is True
        assert is_ascii(b"") is True
        assert is_ascii("héllo") is False
        assert is_ascii(b"\x80") is False

    def test_strip_keeps_only_ascii(self):
        assert strip("héllo wörld") == "hllo wrld"
        assert strip(b"a\xffb") == b"ab"

    def test_check_well_formed(self):
        assert check("héllo 東京 😀") is True
        assert check(b"") is True

    def test_check_truncated_or_broken(self):
        assert check(b"\xc3") is False
        assert check(b"\xc3A") is False
        assert check(b"\xe2\x82") is False
        assert check(b"\xff") is False
        assert check(b"\x80") is False

    def test_check_is_structural_only(self):
        """Overlong and surrogate byte shapes pass the structural check."""
        assert check(b"\xc0\x80") is True
        assert check(b"\xed\xa0\x80") is True


class TestBadByteRepair(unittest.TestCase):
    def test_valid_input_unchanged(self):
        text = "Москва, héllo, 😀\x00\x7f"
        assert bad_byte_repair(text) == text

    def test_bad_bytes_replaced(self):
        assert bad_byte_repair(b"a\xffb\xc0\x80c", b"?") == b"a?b??c"

    def test_bad_bytes_dropped_by_default(self):
        assert bad_byte_repair(b"a\xed\xa0\x80b") == b"ab"

    def test_truncated_sequence_replaced_bytewise(self):
        assert bad_byte_repair(b"x\xe2\x82", b"?") == b"x??"

    def test_repair_output_passes_check(self):
        repaired = bad_byte_repair(b"\xf4\x90\x80\x80\xc3A\xfe", b"?")
        assert check(repaired)
        repaired.decode("utf-8")


if __name__ == "__main__":
    unittest.main()
