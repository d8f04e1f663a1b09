"""Table-driven normalization: deaccenting, special characters, romanization."""

import enum
import functools
import re

from .accents import LOWER_ACCENTS, UPPER_ACCENTS
from .constants import SLUG_DROP_CHARS, SLUG_SEPARATOR_CHARS, SPECIAL_CHARS
from .index import trim
from .lazy import once
from .romanization import ROMANIZATION
from .textio import text_function
from .trie import Trie, encode_table
from .validate import is_ascii


class Case(enum.IntEnum):
    """Which letters deaccent() touches."""

    LOWER = -1
    BOTH = 0
    UPPER = 1


@once
def _lower_accents():
    return Trie(encode_table(LOWER_ACCENTS))


@once
def _upper_accents():
    return Trie(encode_table(UPPER_ACCENTS))


@once
def _romanization():
    return Trie(encode_table(ROMANIZATION))


def _char_alternation(chars):
    """Bytes pattern matching any one of ``chars`` without splitting sequences."""
    single = sorted({char for char in chars if ord(char) < 0x80})
    multi = sorted({char for char in chars if ord(char) >= 0x80})
    parts = []
    if single:
        parts.append(b"[" + b"".join(re.escape(char.encode("ascii")) for char in single) + b"]")
    parts.extend(re.escape(char.encode("utf-8")) for char in multi)
    return b"|".join(parts)


@once
def _specials_pattern():
    return b"[\\x00-\\x19]|" + _char_alternation(SPECIAL_CHARS)


@functools.lru_cache(maxsize=32)
def _compiled_specials(extra):
    pattern = _specials_pattern()
    if extra:
        pattern = _char_alternation(extra.decode("utf-8", "surrogateescape")) + b"|" + pattern
    return re.compile(pattern)


@text_function
def deaccent(data, case=Case.BOTH):
    """Replace accented letters with unaccented ASCII equivalents.

    Args:
        data: UTF-8 bytes
        case: ``Case.LOWER`` or ``Case.UPPER`` to limit the replacement to
            one letter case; ``Case.BOTH`` (default) handles both
    """
    if case <= Case.BOTH:
        data = _lower_accents().translate(data)
    if case >= Case.BOTH:
        data = _upper_accents().translate(data)
    return data


@text_function
def strip_specials(data, replacement=b"", extra=b""):
    """Replace punctuation, symbols and control characters.

    Args:
        data: UTF-8 bytes
        replacement: substituted for every special character
        extra: additional characters to treat as special

    Returns:
        the cleaned bytes
    """
    return _compiled_specials(bytes(extra)).sub(lambda match: replacement, data)


@text_function
def romanize(data):
    """Transliterate non-Latin scripts to plain ASCII (lossy)."""
    if is_ascii(data):
        return data
    return _romanization().translate(data)


_SLUG_DROP = re.compile(b"[" + re.escape(SLUG_DROP_CHARS.encode("ascii")) + b"]+")
_SLUG_SEPARATORS = re.compile(b"[\\s" + re.escape(SLUG_SEPARATOR_CHARS.encode("ascii")) + b"]+")


@text_function
def slugify(data):
    """Lowercase, dash-separated form of a title for use in URLs."""
    data = _SLUG_DROP.sub(b"", data)
    data = _SLUG_SEPARATORS.sub(b"-", data)
    return trim(deaccent(data)).lower()
