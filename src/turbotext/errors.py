"""Errors raised (strict mode) or collected (lenient mode) by the UTF-8 codec."""

from __future__ import annotations


class Utf8Error(ValueError):
    """Base class for malformed UTF-8 input or invalid codepoints.

    ``offset`` is a byte offset for errors found while decoding and an index
    into the codepoint sequence for errors found while encoding.
    """

    code = "utf8-error"

    def __init__(self, offset: int | None = None, value: int | None = None, message: str | None = None):
        self.offset = offset
        self.value = value
        self.message = message or self.code
        super().__init__(str(self))

    def __repr__(self) -> str:
        if self.offset is not None:
            return f"{type(self).__name__}(offset={self.offset}, value={self.value!r})"
        return f"{type(self).__name__}()"

    def __str__(self) -> str:
        text = self.code if self.message == self.code else f"{self.code} - {self.message}"
        if self.offset is not None:
            return f"{text} at {self.offset}"
        return text


class IllegalLeadByte(Utf8Error):
    code = "illegal-lead-byte"


class IncompleteSequence(Utf8Error):
    code = "incomplete-sequence"


class OverlongEncoding(Utf8Error):
    code = "overlong-encoding"


class EncodedSurrogate(Utf8Error):
    code = "encoded-surrogate"


class CodepointOutOfRange(Utf8Error):
    code = "codepoint-out-of-range"
