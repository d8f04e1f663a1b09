"""UTF-8 <-> Unicode codepoint conversion.

A hand-written decoder that does not rely on Python's codec machinery, so
that malformed input can be diagnosed byte by byte. Strict mode raises the
first :class:`~turbotext.errors.Utf8Error`; lenient mode recovers and, when
given an ``errors`` list, records what it recovered from.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .errors import (
    CodepointOutOfRange,
    EncodedSurrogate,
    IllegalLeadByte,
    IncompleteSequence,
    OverlongEncoding,
    Utf8Error,
)

logger = logging.getLogger(__name__)

BOM = 0xFEFF
MAX_CODEPOINT = 0x10FFFF

# Smallest codepoint that needs a sequence of the given length.
_SHORTEST_FORM = {2: 0x80, 3: 0x800, 4: 0x10000}


def sequence_length(lead: int) -> int:
    """Number of bytes announced by a lead byte, or 0 if it cannot lead."""
    if lead < 0x80:
        return 1
    if lead & 0xE0 == 0xC0:
        return 2
    if lead & 0xF0 == 0xE0:
        return 3
    if lead & 0xF8 == 0xF0:
        return 4
    return 0


def is_surrogate(codepoint: int) -> bool:
    return 0xD800 <= codepoint <= 0xDFFF


class DecodeState:
    """Running state of the multi-byte sequence being assembled."""

    __slots__ = ("remaining", "size", "start", "value")

    def __init__(self):
        self.reset()

    def reset(self):
        self.remaining = 0
        self.value = 0
        self.size = 1
        self.start = 0

    def begin(self, lead, size, start):
        # Keep only the payload bits of the lead byte (0x1F, 0x0F or 0x07).
        self.value = lead & (0x7F >> size)
        self.size = size
        self.remaining = size - 1
        self.start = start

    def feed(self, byte):
        self.value = (self.value << 6) | (byte & 0x3F)
        self.remaining -= 1

    @property
    def in_sequence(self):
        return self.remaining > 0


class Decoder:
    """Byte-at-a-time UTF-8 decoder.

    Two states: expecting a lead byte, or expecting the continuation bytes of
    a sequence whose progress is held in a :class:`DecodeState`.
    """

    EXPECT_LEAD = 0
    EXPECT_CONTINUATION = 1

    __slots__ = ("errors", "output", "seq", "state", "strict")

    def __init__(self, strict=False, errors=None):
        self.strict = bool(strict)
        self.errors = errors
        self.output = []
        self.seq = DecodeState()
        self.state = self.EXPECT_LEAD

    def run(self, data) -> list[int]:
        index = 0
        length = len(data)
        while index < length:
            byte = data[index]
            if self.state == self.EXPECT_LEAD:
                self._state_lead(byte, index)
                index += 1
            elif byte & 0xC0 == 0x80:
                self._state_continuation(byte)
                index += 1
            else:
                # Abandon the broken sequence and restart at this byte.
                self._emit_error(IncompleteSequence(index, byte, "expected continuation byte"))
                self._reset()
        if self.state == self.EXPECT_CONTINUATION:
            self._emit_error(IncompleteSequence(length, None, "input ends inside a sequence"))
            self._reset()
        return self.output

    def _state_lead(self, byte, index):
        size = sequence_length(byte)
        if size == 1:
            self.output.append(byte)
        elif size == 0:
            self._emit_error(IllegalLeadByte(index, byte))
        else:
            self.seq.begin(byte, size, index)
            self.state = self.EXPECT_CONTINUATION

    def _state_continuation(self, byte):
        seq = self.seq
        seq.feed(byte)
        if seq.in_sequence:
            return
        codepoint = seq.value
        if codepoint < _SHORTEST_FORM[seq.size]:
            self._emit_error(OverlongEncoding(seq.start, codepoint, f"{seq.size}-byte form of U+{codepoint:04X}"))
        elif is_surrogate(codepoint):
            self._emit_error(EncodedSurrogate(seq.start, codepoint))
        elif codepoint > MAX_CODEPOINT:
            self._emit_error(CodepointOutOfRange(seq.start, codepoint))
        if codepoint != BOM:
            self.output.append(codepoint)
        self._reset()

    def _reset(self):
        self.seq.reset()
        self.state = self.EXPECT_LEAD

    def _emit_error(self, error: Utf8Error):
        _recover(error, self.strict, self.errors)


def _recover(error: Utf8Error, strict: bool, errors: list | None) -> None:
    if strict:
        raise error
    logger.debug("Recovered from malformed UTF-8: %s", error)
    if errors is not None:
        errors.append(error)


def decode(data: bytes, strict: bool = False, errors: list | None = None) -> list[int]:
    """Decode UTF-8 bytes into a list of codepoints.

    Args:
        data: UTF-8 encoded bytes
        strict: raise on the first malformed sequence or invalid codepoint
        errors: optional list that collects recovered errors in lenient mode

    Returns:
        list of codepoints, with any BOM (U+FEFF) removed

    Raises:
        Utf8Error: in strict mode, the first problem found
    """
    if isinstance(data, str):
        raise TypeError("decode() expects bytes, not str")
    return Decoder(strict=strict, errors=errors).run(data)


def encode(codepoints: Iterable[int], strict: bool = False, errors: list | None = None) -> bytes:
    """Encode codepoints as UTF-8.

    BOMs are skipped. Surrogates and values outside ``[0, 0x10FFFF]`` raise
    in strict mode and are dropped otherwise.
    """
    out = bytearray()
    for index, cp in enumerate(codepoints):
        if 0 <= cp <= 0x7F:
            out.append(cp)
        elif 0 < cp <= 0x7FF:
            out.append(0xC0 | (cp >> 6))
            out.append(0x80 | (cp & 0x3F))
        elif cp == BOM:
            continue
        elif is_surrogate(cp):
            _recover(EncodedSurrogate(index, cp), strict, errors)
        elif 0 < cp <= 0xFFFF:
            out.append(0xE0 | (cp >> 12))
            out.append(0x80 | ((cp >> 6) & 0x3F))
            out.append(0x80 | (cp & 0x3F))
        elif 0 < cp <= MAX_CODEPOINT:
            out.append(0xF0 | (cp >> 18))
            out.append(0x80 | ((cp >> 12) & 0x3F))
            out.append(0x80 | ((cp >> 6) & 0x3F))
            out.append(0x80 | (cp & 0x3F))
        else:
            _recover(CodepointOutOfRange(index, cp), strict, errors)
    return bytes(out)
