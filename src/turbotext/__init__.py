from .case import to_lower, to_upper, ucfirst, ucwords
from .codec import decode, encode
from .entities import from_html_entities, to_html_entities
from .errors import (
    CodepointOutOfRange,
    EncodedSurrogate,
    IllegalLeadByte,
    IncompleteSequence,
    OverlongEncoding,
    Utf8Error,
)
from .index import basename, correct_index, find, length, ltrim, rtrim, substr, substr_replace, trim
from .normalize import Case, deaccent, romanize, slugify, strip_specials
from .translit import Direction, transliterate, transliterate_for_locale
from .utf16 import from_utf16be, to_utf16be
from .validate import bad_byte_repair, check, is_ascii, strip

__all__ = [
    "Case",
    "CodepointOutOfRange",
    "Direction",
    "EncodedSurrogate",
    "IllegalLeadByte",
    "IncompleteSequence",
    "OverlongEncoding",
    "Utf8Error",
    "bad_byte_repair",
    "basename",
    "check",
    "correct_index",
    "decode",
    "deaccent",
    "encode",
    "find",
    "from_html_entities",
    "from_utf16be",
    "is_ascii",
    "length",
    "ltrim",
    "romanize",
    "rtrim",
    "slugify",
    "strip",
    "strip_specials",
    "substr",
    "substr_replace",
    "to_html_entities",
    "to_lower",
    "to_upper",
    "to_utf16be",
    "transliterate",
    "transliterate_for_locale",
    "trim",
    "ucfirst",
    "ucwords",
]
