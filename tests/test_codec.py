"""Tests for the codepoint codec and its error collection."""

import unittest

from turbotext import (
    CodepointOutOfRange,
    EncodedSurrogate,
    IllegalLeadByte,
    IncompleteSequence,
    OverlongEncoding,
    Utf8Error,
    decode,
    encode,
)
from turbotext.codec import sequence_length


class TestDecode(unittest.TestCase):
    def test_ascii_and_multibyte(self):
        assert decode(b"h\xc3\xa9\xe2\x82\xac") == [0x68, 0xE9, 0x20AC]

    def test_four_byte_sequence(self):
        assert decode("𝜋".encode("utf-8")) == [0x1D70B]

    def test_empty_input(self):
        assert decode(b"") == []

    def test_bom_is_dropped(self):
        assert decode(b"\xef\xbb\xbfab") == [0x61, 0x62]

    def test_str_input_rejected(self):
        with self.assertRaises(TypeError):
            decode("abc")

    def test_sequence_length(self):
        assert sequence_length(0x41) == 1
        assert sequence_length(0xC3) == 2
        assert sequence_length(0xE2) == 3
        assert sequence_length(0xF0) == 4
        assert sequence_length(0x80) == 0
        assert sequence_length(0xF8) == 0


class TestStrictDecode(unittest.TestCase):
    """Strict mode raises the first problem with its byte offset."""

    def test_overlong_rejected(self):
        with self.assertRaises(OverlongEncoding) as ctx:
            decode(bytes([0xC0, 0x80]), strict=True)
        assert ctx.exception.offset == 0
        assert ctx.exception.value == 0

    def test_three_byte_overlong(self):
        with self.assertRaises(OverlongEncoding):
            decode(b"ab\xe0\x80\xaf", strict=True)

    def test_surrogate_rejected(self):
        with self.assertRaises(EncodedSurrogate) as ctx:
            decode(b"x\xed\xa0\x80", strict=True)
        assert ctx.exception.offset == 1
        assert ctx.exception.value == 0xD800

    def test_out_of_range_rejected(self):
        with self.assertRaises(CodepointOutOfRange) as ctx:
            decode(b"\xf4\x90\x80\x80", strict=True)
        assert ctx.exception.value == 0x110000

    def test_illegal_lead_byte(self):
        with self.assertRaises(IllegalLeadByte) as ctx:
            decode(b"a\xffb", strict=True)
        assert ctx.exception.offset == 1
        assert ctx.exception.value == 0xFF

    def test_stray_continuation_is_illegal_lead(self):
        with self.assertRaises(IllegalLeadByte):
            decode(b"\x80", strict=True)

    def test_legacy_five_byte_lead_rejected(self):
        with self.assertRaises(IllegalLeadByte):
            decode(b"\xf8\x88\x80\x80\x80", strict=True)

    def test_broken_continuation(self):
        with self.assertRaises(IncompleteSequence) as ctx:
            decode(b"\xc3A", strict=True)
        assert ctx.exception.offset == 1

    def test_truncated_tail(self):
        with self.assertRaises(IncompleteSequence) as ctx:
            decode(b"ab\xe2\x82", strict=True)
        assert ctx.exception.offset == 4
        assert ctx.exception.value is None

    def test_errors_are_value_errors(self):
        with self.assertRaises(ValueError):
            decode(b"\xff", strict=True)


class TestLenientDecode(unittest.TestCase):
    def test_overlong_accepted(self):
        assert decode(bytes([0xC0, 0x80])) == [0]

    def test_illegal_byte_skipped(self):
        errors = []
        assert decode(b"a\xffb", errors=errors) == [0x61, 0x62]
        assert len(errors) == 1
        assert isinstance(errors[0], IllegalLeadByte)

    def test_restart_at_offending_byte(self):
        """A broken sequence is abandoned and the byte that broke it is kept."""
        errors = []
        assert decode(b"\xc3A\xc3\xa9", errors=errors) == [0x41, 0xE9]
        assert [type(error) for error in errors] == [IncompleteSequence]

    def test_truncated_tail_dropped(self):
        errors = []
        assert decode(b"ab\xe2\x82", errors=errors) == [0x61, 0x62]
        assert errors[0].offset == 4

    def test_errors_not_collected_without_list(self):
        assert decode(b"\xff\xfe") == []

    def test_recoveries_logged_at_debug(self):
        with self.assertLogs("turbotext.codec", level="DEBUG") as logs:
            decode(b"\xff")
        assert "illegal-lead-byte" in logs.output[0]

    def test_all_error_codes_are_strings(self):
        errors = []
        decode(b"\xff\xc0\x80\xed\xa0\x80\xf4\x90\x80\x80\xc3", errors=errors)
        assert len(errors) == 5
        assert all(isinstance(error, Utf8Error) for error in errors)
        assert len({error.code for error in errors}) == 5


class TestEncode(unittest.TestCase):
    def test_all_lengths(self):
        assert encode([0x68, 0xE9, 0x20AC, 0x1F600]) == "hé€😀".encode("utf-8")

    def test_nul(self):
        assert encode([0]) == b"\x00"

    def test_bom_skipped(self):
        assert encode([0xFEFF, 0x41]) == b"A"

    def test_surrogate_strict(self):
        with self.assertRaises(EncodedSurrogate) as ctx:
            encode([0x41, 0xDC00], strict=True)
        assert ctx.exception.offset == 1

    def test_surrogate_lenient(self):
        errors = []
        assert encode([0x41, 0xDC00, 0x42], errors=errors) == b"AB"
        assert isinstance(errors[0], EncodedSurrogate)

    def test_out_of_range(self):
        with self.assertRaises(CodepointOutOfRange):
            encode([0x110000], strict=True)
        with self.assertRaises(CodepointOutOfRange):
            encode([-1], strict=True)
        assert encode([0x110000, 0x41]) == b"A"


class TestRoundTrip(unittest.TestCase):
    def test_codepoints_round_trip(self):
        samples = [
            [],
            [0, 0x7F, 0x80, 0x7FF, 0x800, 0xD7FF, 0xE000, 0xFFFD, 0x10000, 0x10FFFF],
            [ord(char) for char in "Њива, 東京 and 𝜋"],
        ]
        for codepoints in samples:
            assert decode(encode(codepoints, strict=True), strict=True) == codepoints

    def test_round_trip_removes_bom(self):
        assert decode(encode([0x41, 0xFEFF, 0x42], strict=True), strict=True) == [0x41, 0x42]

    def test_bytes_round_trip(self):
        for text in ["", "plain", "héllo wörld", "Москва", "日本語", "😀🙂"]:
            data = text.encode("utf-8")
            assert encode(decode(data, strict=True)) == data


class TestErrorFormatting(unittest.TestCase):
    def test_str_includes_code_and_offset(self):
        assert str(IllegalLeadByte(1, 0xFF)) == "illegal-lead-byte at 1"

    def test_str_with_message(self):
        error = IncompleteSequence(4, None, "input ends inside a sequence")
        assert str(error) == "incomplete-sequence - input ends inside a sequence at 4"

    def test_repr(self):
        assert repr(EncodedSurrogate(2, 0xD800)) == "EncodedSurrogate(offset=2, value=55296)"
        assert repr(Utf8Error()) == "Utf8Error()"


if __name__ == "__main__":
    unittest.main()
