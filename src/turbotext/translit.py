"""Serbian Cyrillic <-> Latin transliteration.

Markup-aware by default: tags and character references pass through
untouched, except for the values of ``title`` and ``alt`` attributes, which
are transliterated like content.

One forward table (Latin -> Cyrillic) drives both directions; the reverse
table is derived from it on first use. Capitalization needs care because
the digraphs Dž, Lj and Nj are single letters in Cyrillic:

  - "Nj" and "NJ" both become Њ, wherever they appear
  - going back, a regex finds runs of Cyrillic capitals so that Њ becomes
    "NJ" inside an all-caps word and "Nj" elsewhere
"""

import enum
import re

from .lazy import once
from .trie import Trie

LOWERCASE = {
    "a": "а", "b": "б", "v": "в", "g": "г", "d": "д", "đ": "ђ", "e": "е",
    "ž": "ж", "z": "з", "i": "и", "j": "ј", "k": "к", "l": "л", "m": "м",
    "n": "н", "o": "о", "p": "п", "r": "р", "s": "с", "t": "т", "ć": "ћ",
    "u": "у", "f": "ф", "h": "х", "c": "ц", "č": "ч", "š": "ш",
}

UPPERCASE = {
    "A": "А", "B": "Б", "V": "В", "G": "Г", "D": "Д", "Đ": "Ђ", "E": "Е",
    "Ž": "Ж", "Z": "З", "I": "И", "J": "Ј", "K": "К", "L": "Л", "M": "М",
    "N": "Н", "O": "О", "P": "П", "R": "Р", "S": "С", "T": "Т", "Ć": "Ћ",
    "U": "У", "F": "Ф", "H": "Х", "C": "Ц", "Č": "Ч", "Š": "Ш",
}

DIGRAPHS = {"lj": "љ", "nj": "њ", "dž": "џ"}
TITLE_DIGRAPHS = {"Lj": "Љ", "Nj": "Њ", "Dž": "Џ"}
CAPS_DIGRAPHS = {"LJ": "Љ", "NJ": "Њ", "DŽ": "Џ"}

# printf placeholders must not become "%с" / "%д"
PLACEHOLDERS = {"%s": "%s", "%d": "%d"}

LATIN_TO_CYRILLIC = {**PLACEHOLDERS, **LOWERCASE, **UPPERCASE, **DIGRAPHS}


class Direction(enum.Enum):
    """Target script, named by its locale."""

    TO_CYRILLIC = "sr-Cyrl"
    TO_LATIN = "sr-Latn"


def _char_class(chars):
    return "[" + "".join(re.escape(char) for char in chars) + "]"


_CYRILLIC_LOWER = _char_class(list(LOWERCASE.values()) + list(DIGRAPHS.values()))
_CYRILLIC_UPPER = _char_class(list(UPPERCASE.values()) + list(CAPS_DIGRAPHS.values()))

# Runs of two or more Cyrillic capitals that do not touch a lowercase letter
_CYRILLIC_CAPS_RUN = re.compile(f"(?<!{_CYRILLIC_LOWER}){_CYRILLIC_UPPER}{{2,}}(?!{_CYRILLIC_LOWER})")

# Tags and character references; captured so re.split() keeps them
_MARKUP = re.compile(r"(<[^>]+>|&[a-z]+;|&0x[0-9a-f]+;|&#[0-9]+;)", re.S | re.I)
_TEXT_ATTRIBUTE = re.compile(r'(\s(?:title|alt))="([^"]+)"')

# "%1$s" came out as "%1$с"
_POSITIONAL_PLACEHOLDER = re.compile(r"%(\d+\$|)с")


@once
def _to_cyrillic_trie():
    # Capitalized digraphs take precedence over their two single letters
    return Trie({**LATIN_TO_CYRILLIC, **TITLE_DIGRAPHS, **CAPS_DIGRAPHS})


@once
def _to_latin_trie():
    # First mapping listed wins, so Љ reads back as "Lj" rather than "LJ"
    inverse = {}
    for table in (TITLE_DIGRAPHS, LATIN_TO_CYRILLIC):
        for latin, cyrillic in table.items():
            inverse.setdefault(cyrillic, latin)
    return Trie(inverse)


@once
def _caps_to_latin_trie():
    inverse = {cyrillic: latin for latin, cyrillic in UPPERCASE.items()}
    inverse.update((cyrillic, latin) for latin, cyrillic in CAPS_DIGRAPHS.items())
    return Trie(inverse)


def _content_to_cyrillic(text):
    return _to_cyrillic_trie().translate(text)


def _content_to_latin(text):
    caps = _caps_to_latin_trie()
    text = _CYRILLIC_CAPS_RUN.sub(lambda match: caps.translate(match.group(0)), text)
    return _to_latin_trie().translate(text)


def _rewrite_markup(tag, direction):
    def attribute(match):
        return f'{match.group(1)}="{transliterate(match.group(2), direction)}"'

    return _TEXT_ATTRIBUTE.sub(attribute, tag)


def transliterate(text, direction, markup=True):
    """Transliterate Serbian text between Cyrillic and Latin script.

    Args:
        text: ``str``, or UTF-8 ``bytes`` (the result is then ``bytes`` too)
        direction: a :class:`Direction`, or its locale value
        markup: leave HTML tags and character references alone

    Returns:
        the transliterated text
    """
    if isinstance(text, (bytes, bytearray)):
        return transliterate(bytes(text).decode("utf-8"), direction, markup).encode("utf-8")
    direction = Direction(direction)
    rewrite = _content_to_cyrillic if direction is Direction.TO_CYRILLIC else _content_to_latin

    if markup:
        # Even items are content, odd items are markup
        pieces = _MARKUP.split(text)
        for index, piece in enumerate(pieces):
            if index % 2:
                pieces[index] = _rewrite_markup(piece, direction)
            else:
                pieces[index] = rewrite(piece)
        out = "".join(pieces)
    else:
        out = rewrite(text)

    if direction is Direction.TO_CYRILLIC:
        out = _POSITIONAL_PLACEHOLDER.sub(r"%\1s", out)
    return out


def transliterate_for_locale(text, locale):
    """Plain-text transliteration into the script of a display locale.

    ``"sr-Cyrl"`` and ``"sr-Latn"`` select the target script; any other
    locale returns ``text`` unchanged.
    """
    try:
        direction = Direction(locale)
    except ValueError:
        return text
    return transliterate(text, direction, markup=False)
