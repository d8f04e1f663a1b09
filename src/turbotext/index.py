"""Character-counted indexing on UTF-8 bytes.

Every operation has two implementations. The native one decodes to ``str``
and lets Python count characters. The fallback works on the raw bytes with
regular expressions built from a fixed-width "any UTF-8 character" group,
and is used when ``flags.NATIVE_MULTIBYTE`` is off.
"""

from __future__ import annotations

import re

from . import flags
from .textio import text_function

# One UTF-8 character: an ASCII byte, or a lead byte with its continuations.
# Stray continuation bytes do not match, so malformed input fails to match
# rather than being cut mid-sequence.
_ANY_CHAR = rb"(?:[\x00-\x7F]|[\xC0-\xFF][\x80-\xBF]*)"
_MULTIBYTE_CHAR = re.compile(rb"[\xC0-\xFF][\x80-\xBF]*")

# Largest count used in a single {n} quantifier. Longer runs are built from
# repeated groups of this size.
REPEAT_CEILING = 65535

# PHP's default trim() set.
_DEFAULT_TRIM = b" \t\n\r\x00\x0b"


def _decode(data):
    return data.decode("utf-8", "surrogateescape")


def _encode(text):
    return text.encode("utf-8", "surrogateescape")


def _char_count(data):
    # Each multi-byte character becomes one placeholder byte, like a lossy
    # conversion to Latin-1. Good for counting only.
    return len(_MULTIBYTE_CHAR.sub(b"?", data))


def _repeat(count):
    """Pattern matching exactly ``count`` characters."""
    chunks, rest = divmod(count, REPEAT_CEILING)
    pattern = b""
    if chunks:
        pattern = b"(?:%s{%d}){%d}" % (_ANY_CHAR, REPEAT_CEILING, chunks)
    return pattern + b"%s{%d}" % (_ANY_CHAR, rest)


@text_function
def correct_index(data, i, round_to_next=False):
    """Move a byte index onto a character boundary.

    Args:
        data: UTF-8 bytes
        i: byte index, possibly pointing into the middle of a character
        round_to_next: move forward to the next character instead of back
            to the start of the current one

    Returns:
        byte index in ``[0, len(data)]``
    """
    if i <= 0:
        return 0
    limit = len(data)
    if i >= limit:
        return limit
    if round_to_next:
        while i < limit and data[i] & 0xC0 == 0x80:
            i += 1
    else:
        while i and data[i] & 0xC0 == 0x80:
            i -= 1
    return i


@text_function
def length(data):
    """Number of characters in UTF-8 bytes."""
    if flags.NATIVE_MULTIBYTE:
        return len(_decode(data))
    return _char_count(data)


@text_function
def substr(data, offset, length=None):
    """Character-counted substring with PHP ``substr`` semantics.

    A negative ``offset`` counts from the end. ``length=None`` takes the rest
    of the string, a negative ``length`` leaves that many characters off the
    end, and ``length=0`` or an offset past the end gives an empty result.
    """
    offset = int(offset)
    if length is not None:
        length = int(length)
    if flags.NATIVE_MULTIBYTE:
        return _native_substr(data, offset, length)
    return _fallback_substr(data, offset, length)


def _native_substr(data, offset, length):
    text = _decode(data)
    size = len(text)
    if offset < 0:
        offset = max(size + offset, 0)
    if length is None:
        return _encode(text[offset:])
    if length >= 0:
        return _encode(text[offset:offset + length])
    return _encode(text[offset:size + length])


def _fallback_substr(data, offset, length):
    if length == 0:
        return b""
    if offset < 0 and length is not None and length < 0 and length < offset:
        return b""

    # Counting characters is the expensive part, so only do it when needed.
    count = None
    if offset < 0:
        count = _char_count(data)
        offset = max(count + offset, 0)

    if offset > 0:
        offset_pattern = b"(?:" + _repeat(offset) + b")"
    else:
        offset_pattern = b""

    if length is None:
        length_pattern = b"(" + _ANY_CHAR + b"*)\\Z"
    else:
        if count is None:
            count = _char_count(data)
        if offset > count:
            return b""
        if length > 0:
            length = min(count - offset, length)
            length_pattern = b"(" + _repeat(length) + b")"
        else:
            if length < offset - count:
                return b""
            length_pattern = b"(" + _ANY_CHAR + b"*)(?:" + _repeat(-length) + b")\\Z"

    match = re.match(offset_pattern + length_pattern, data, re.S)
    if match is None:
        return b""
    return match.group(1)


@text_function
def substr_replace(data, replacement, start, length=0):
    """Replace ``length`` characters starting at character ``start``."""
    head = substr(data, 0, start) if start > 0 else b""
    return head + replacement + substr(data, start + length)


@text_function
def find(haystack, needle, offset=0):
    """Character index of ``needle`` at or after character ``offset``, or -1."""
    if flags.NATIVE_MULTIBYTE:
        return _decode(haystack).find(_decode(needle), offset)

    # Byte search, then convert the hit back to a character index. If the
    # hit lies before the requested character offset, skip ahead and retry.
    skip = 0
    position = None
    while position is None or position < offset:
        hit = haystack.find(needle, offset + skip)
        if hit == -1:
            return -1
        position = _char_count(haystack[:hit])
        if position < offset:
            skip = hit - position
    return position


def _trim_pattern(chars, where):
    if not chars:
        return None
    alternatives = b"|".join(re.escape(char) for char in set(re.findall(_ANY_CHAR, chars)))
    run = b"(?:" + alternatives + b")+"
    if where == "left":
        return re.compile(b"\\A" + run)
    return re.compile(run + b"\\Z")


@text_function
def ltrim(data, chars=None):
    """Strip leading ``chars`` (any of them, multi-byte ones included)."""
    if chars is None:
        return data.lstrip(_DEFAULT_TRIM)
    pattern = _trim_pattern(chars, "left")
    return pattern.sub(b"", data) if pattern else data


@text_function
def rtrim(data, chars=None):
    """Strip trailing ``chars`` (any of them, multi-byte ones included)."""
    if chars is None:
        return data.rstrip(_DEFAULT_TRIM)
    pattern = _trim_pattern(chars, "right")
    return pattern.sub(b"", data) if pattern else data


@text_function
def trim(data, chars=None):
    if chars is None:
        return data.strip(_DEFAULT_TRIM)
    return ltrim(rtrim(data, chars), chars)


@text_function
def basename(path, suffix=b""):
    """Last component of a ``/`` or ``\\`` separated path.

    Unlike ``os.path.basename`` both separators are honored on every
    platform, and a trailing separator is ignored. A matching ``suffix`` is
    cut off the result.
    """
    path = path.strip(b"\\/")
    cut = max(path.rfind(b"/"), path.rfind(b"\\"))
    if cut > 0:
        path = path[cut + 1:]
    if suffix and path.endswith(suffix):
        path = path[:-len(suffix)]
    return path
