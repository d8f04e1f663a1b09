"""Cheap byte-level checks and repairs that do not build codepoints."""

import re

from .codec import sequence_length
from .textio import text_function

_NON_ASCII = re.compile(rb"[^\x00-\x7F]")

# Every legal UTF-8 byte shape (W3C "Multilingual Forms" pattern, widened to
# the whole ASCII range), with a catch-all for one illegal byte in group 2.
_UTF8_OR_BAD_BYTE = re.compile(
    rb"([\x00-\x7F]"  # ASCII, control characters included
    rb"|[\xC2-\xDF][\x80-\xBF]"  # non-overlong 2-byte
    rb"|\xE0[\xA0-\xBF][\x80-\xBF]"  # excluding overlongs
    rb"|[\xE1-\xEC\xEE\xEF][\x80-\xBF]{2}"  # straight 3-byte
    rb"|\xED[\x80-\x9F][\x80-\xBF]"  # excluding surrogates
    rb"|\xF0[\x90-\xBF][\x80-\xBF]{2}"  # planes 1-3
    rb"|[\xF1-\xF3][\x80-\xBF]{3}"  # planes 4-15
    rb"|\xF4[\x80-\x8F][\x80-\xBF]{2}"  # plane 16
    rb"|(.))",  # invalid byte
    re.S,
)


@text_function
def is_ascii(data):
    """True if no byte has the high bit set."""
    return _NON_ASCII.search(data) is None


@text_function
def strip(data):
    """Drop every non-ASCII byte, leaving pure 7-bit text."""
    return _NON_ASCII.sub(b"", data)


@text_function
def check(data):
    """Structural UTF-8 test: every lead byte is followed by its continuations.

    Only the byte shapes are checked. Overlong forms, encoded surrogates and
    out-of-range values pass; use ``decode(strict=True)`` to reject those.
    """
    index = 0
    length = len(data)
    while index < length:
        size = sequence_length(data[index])
        if size == 0:
            return False
        for _ in range(size - 1):
            index += 1
            if index == length or data[index] & 0xC0 != 0x80:
                return False
        index += 1
    return True


@text_function
def bad_byte_repair(data, replacement=b""):
    """Replace every byte that is not part of a legal UTF-8 sequence.

    Args:
        data: possibly malformed UTF-8
        replacement: substituted for each bad byte; ASCII is recommended

    Returns:
        well-formed UTF-8
    """
    parts = []
    for match in _UTF8_OR_BAD_BYTE.finditer(data):
        if match.group(2) is None:
            parts.append(match.group(0))
        else:
            parts.append(replacement)
    return b"".join(parts)
