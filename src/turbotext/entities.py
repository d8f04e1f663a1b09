"""HTML character reference encoding and decoding.

Encodes every non-ASCII character as a numeric reference (&#233;, &#x439;)
and decodes numeric references back. Named references are limited to the
HTML4 set (&amp;, &eacute;, &hellip;) and are only decoded on request, so
text like "&amp;#38;" is never decoded twice.
"""

import html.entities
import re

from .codec import MAX_CODEPOINT, decode, encode, is_surrogate
from .lazy import once
from .textio import text_function

# Python's HTML4 table maps codepoint -> name ("eacute"), without "&" and ";"
_CODEPOINT_TO_NAME = html.entities.codepoint2name

_NUMERIC_REFERENCE = re.compile(rb"&#(?:[Xx]([0-9A-Fa-f]+)|([0-9]+));")
_ANY_REFERENCE = re.compile(rb"&#(?:[Xx]([0-9A-Fa-f]+)|([0-9]+));|&([0-9A-Za-z]+);")

_REPLACEMENT = "\ufffd".encode("utf-8")


@once
def _named_entities():
    """Reverse of the HTML4 table: b"eacute" -> UTF-8 bytes of U+00E9."""
    return {name.encode("ascii"): chr(codepoint).encode("utf-8") for codepoint, name in _CODEPOINT_TO_NAME.items()}


def _codepoint_bytes(codepoint):
    # References to surrogates or past the last plane cannot be represented
    if is_surrogate(codepoint) or codepoint > MAX_CODEPOINT:
        return _REPLACEMENT
    return encode([codepoint])


def _decode_numeric(match):
    hex_digits, decimal_digits = match.group(1), match.group(2)
    if hex_digits is not None:
        return _codepoint_bytes(int(hex_digits, 16))
    return _codepoint_bytes(int(decimal_digits))


def _decode_any(match):
    name = match.group(3)
    if name is None:
        return _decode_numeric(match)
    return _named_entities().get(name, match.group(0))


@text_function
def to_html_entities(data):
    """Encode every non-ASCII character as a numeric character reference.

    Characters below U+0100 use decimal form, all others hexadecimal.
    """
    parts = []
    for codepoint in decode(data):
        if codepoint < 0x80:
            parts.append(bytes((codepoint,)))
        elif codepoint < 0x100:
            parts.append(b"&#%d;" % codepoint)
        else:
            parts.append(b"&#x%x;" % codepoint)
    return b"".join(parts)


@text_function
def from_html_entities(data, decode_named=False):
    """Decode character references to UTF-8.

    Args:
        data: UTF-8 bytes containing references
        decode_named: also decode HTML4 named references such as ``&amp;``;
            unknown names are left as they are

    Returns:
        UTF-8 bytes with the references replaced
    """
    if decode_named:
        return _ANY_REFERENCE.sub(_decode_any, data)
    return _NUMERIC_REFERENCE.sub(_decode_numeric, data)
