"""URL-safe slug derivation for content records."""

import re
import unicodedata

# Letters that NFD decomposition leaves intact (stroked or ligature forms).
_LETTER_SUBSTITUTIONS = str.maketrans({
    "Đ": "D", "đ": "d",
    "Ð": "D", "ð": "d",
    "Ł": "L", "ł": "l",
    "Ø": "O", "ø": "o",
    "Ħ": "H", "ħ": "h",
    "Ŧ": "T", "ŧ": "t",
    "Þ": "Th", "þ": "th",
    "Æ": "Ae", "æ": "ae",
    "Œ": "Oe", "œ": "oe",
    "ß": "ss",
    "ı": "i",
})

_DISALLOWED = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")


def slugify(title: str) -> str:
    """Derive a lowercase, hyphenated slug from a human title.

    >>> slugify("Điện Biên Phủ Street")
    'dien-bien-phu-street'
    """
    decomposed = unicodedata.normalize("NFD", title)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    text = stripped.translate(_LETTER_SUBSTITUTIONS).lower()
    text = _DISALLOWED.sub("", text)
    return _WHITESPACE.sub("-", text.strip()).strip("-")


def is_valid_slug(value: str) -> bool:
    """True when *value* is non-empty and already in slug form."""
    return bool(value) and slugify(value) == value
