"""UTF-8 <-> UTF-16BE conversion."""

import struct

from . import flags
from .codec import decode, encode
from .errors import CodepointOutOfRange
from .textio import text_function

BOM_BE = b"\xfe\xff"


@text_function(returns_text=False)
def to_utf16be(data, bom=False):
    """Convert UTF-8 to UTF-16BE bytes, optionally prefixed with a BOM.

    Without the native facility each character is packed as a single 16-bit
    unit (UCS-2), so characters outside the Basic Multilingual Plane raise
    :class:`~turbotext.errors.CodepointOutOfRange`.
    """
    prefix = BOM_BE if bom else b""
    if flags.NATIVE_MULTIBYTE:
        return prefix + data.decode("utf-8", "ignore").replace("\ufeff", "").encode("utf-16-be")
    codepoints = decode(data)
    for index, codepoint in enumerate(codepoints):
        if codepoint > 0xFFFF:
            raise CodepointOutOfRange(index, codepoint, "needs a surrogate pair")
    return prefix + struct.pack(f">{len(codepoints)}H", *codepoints)


@text_function(returns_text=False)
def from_utf16be(data):
    """Convert UTF-16BE bytes to UTF-8.

    A trailing odd byte is ignored, BOMs are dropped. Lone surrogates are
    dropped; the native path also joins surrogate pairs.
    """
    even = data[:len(data) - len(data) % 2]
    if flags.NATIVE_MULTIBYTE:
        return even.decode("utf-16-be", "ignore").replace("\ufeff", "").encode("utf-8")
    units = struct.unpack(f">{len(even) // 2}H", even)
    return encode(units)
