"""
String case helpers for generated identifiers.

Names are built from free-form fragments (group names, token names,
prefixes) that may contain spaces, punctuation, camelCase humps or
non-ASCII letters. They are split into words and recombined in one of the
``StringCase`` styles, producing identifiers made of ``[A-Za-z0-9_-]`` only.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterable

from .config import StringCase
from .errors import InvalidTokenNameError

# "fontSize" -> "font Size", "HTMLParser" -> "HTML Parser"
_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_WORD = re.compile(r"([A-Z]+)([A-Z][a-z])")
_NON_ALNUM = re.compile(r"[^A-Za-z0-9]+")


def split_words(text: str) -> list[str]:
    """
    Split free-form text into identifier words.

    Examples:
        >>> split_words("Brand / Primary Color")
        ['Brand', 'Primary', 'Color']
        >>> split_words("fontSize-2xl")
        ['font', 'Size', '2xl']
    """
    ascii_text = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    ascii_text = _ACRONYM_WORD.sub(r"\1 \2", ascii_text)
    ascii_text = _LOWER_UPPER.sub(r"\1 \2", ascii_text)
    return [word for word in _NON_ALNUM.split(ascii_text) if word]


def to_case(words: Iterable[str], style: StringCase) -> str:
    """Join words in the given case style."""
    lowered = [word.lower() for word in words]
    if not lowered:
        return ""

    if style == StringCase.KEBAB:
        return "-".join(lowered)
    if style == StringCase.SNAKE:
        return "_".join(lowered)
    if style == StringCase.CONSTANT:
        return "_".join(word.upper() for word in lowered)
    if style == StringCase.FLAT:
        return "".join(lowered)
    if style == StringCase.PASCAL:
        return "".join(word.capitalize() for word in lowered)
    # camelCase
    return lowered[0] + "".join(word.capitalize() for word in lowered[1:])


def _codepoint_word(fragment: str) -> str:
    """Spell a fragment with no ASCII letters or digits by its code points ("色" -> "u8272")."""
    return "u" + "".join(f"{ord(char):04x}" for char in fragment if not char.isspace())


def code_safe_variable_name(fragments: Iterable[str], style: StringCase) -> str:
    """
    Build an identifier from name fragments.

    A fragment without any ASCII letter or digit (``"色"``, ``"★"``) is
    spelled by its code points so that it still contributes a word.

    Args:
        fragments: Name parts in order (prefix, ancestry, name)
        style: Case style to apply

    Returns:
        Identifier containing only letters, digits, ``-`` and ``_``;
        prefixed with ``_`` when it would otherwise start with a digit.

    Raises:
        InvalidTokenNameError: If every fragment is empty or whitespace
    """
    words: list[str] = []
    for fragment in fragments:
        fragment_words = split_words(fragment)
        if not fragment_words and fragment.strip():
            fragment_words = [_codepoint_word(fragment)]
        words.extend(fragment_words)

    if not words:
        raise InvalidTokenNameError("Cannot build an identifier from empty name fragments")

    name = to_case(words, style)
    if name[:1].isdigit():
        name = f"_{name}"
    return name
