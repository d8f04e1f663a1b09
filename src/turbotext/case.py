"""UTF-8 aware case folding."""

import re

from . import flags
from .casemap import LOWER_TO_UPPER
from .index import length, substr
from .lazy import once
from .textio import text_function
from .trie import Trie, encode_table, invert_table

# A "word" is a run of anything but form feed, tab, vertical tab, LF, CR
# and space. None of these bytes can occur inside a multi-byte sequence.
_WORD = re.compile(rb"(^|[\x0c\x09\x0b\x0a\x0d\x20]+)([^\x0c\x09\x0b\x0a\x0d\x20]+)")


@once
def _upper_trie():
    return Trie(encode_table(LOWER_TO_UPPER))


@once
def _lower_trie():
    return Trie(encode_table(invert_table(LOWER_TO_UPPER)))


@text_function
def to_upper(data):
    if flags.NATIVE_MULTIBYTE:
        return data.decode("utf-8", "surrogateescape").upper().encode("utf-8", "surrogateescape")
    return _upper_trie().translate(data)


@text_function
def to_lower(data):
    if flags.NATIVE_MULTIBYTE:
        return data.decode("utf-8", "surrogateescape").lower().encode("utf-8", "surrogateescape")
    return _lower_trie().translate(data)


@text_function
def ucfirst(data):
    """Uppercase the first character only."""
    count = length(data)
    if count == 0:
        return b""
    if count == 1:
        return to_upper(data)
    first = substr(data, 0, 1)
    return to_upper(first) + data[len(first):]


@text_function
def ucwords(data):
    """Uppercase the first character of every whitespace-delimited word."""
    return _WORD.sub(lambda match: match.group(1) + ucfirst(match.group(2)), data)
