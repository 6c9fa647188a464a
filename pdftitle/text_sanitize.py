"""
Character-class filtering for text taken from PDF content streams.
"""

import unicodedata
from typing import Union

SPACE = " "
REPLACEMENT_CHARACTER = "\ufffd"

# Unicode categories counted as graphic: letters, marks, numbers,
# punctuation, symbols and the space separator.
_GRAPHIC_MAJOR_CATEGORIES = {"L", "M", "N", "P", "S"}


def is_graphic(ch: str) -> bool:
    """Return True if ``ch`` is a visible character or a plain space separator."""
    category = unicodedata.category(ch)
    return category[0] in _GRAPHIC_MAJOR_CATEGORIES or category == "Zs"


def printable(value: Union[str, bytes]) -> str:
    """
    Return a copy of ``value`` where every non printable character is a space.

    Bytes are decoded as UTF-8, malformed sequences become U+FFFD first.
    U+FFFD marks a decoding failure and is replaced as well. Lone surrogates
    left by ``surrogateescape`` decoding are not graphic.
    """
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")

    chars = []
    for ch in value:
        if ch != REPLACEMENT_CHARACTER and is_graphic(ch):
            chars.append(ch)
        else:
            chars.append(SPACE)
    return "".join(chars)
