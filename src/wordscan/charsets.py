"""Character classification for O(1) run detection.

Classification order (first match wins):
1. Unicode punctuation (P*) or symbol (S*) -> PUNCTUATION
2. Unicode whitespace -> WHITESPACE
3. Everything else -> WORD

The WORD class is a fallback. Digits, letters outside ASCII and any other
character that is neither punctuation nor whitespace are word characters,
so "ab12" is a single word run.

Usage:
    from wordscan.charsets import classify

    if classify(char) is TokenKind.PUNCTUATION:
        ...
"""

from __future__ import annotations

import unicodedata

from wordscan.tokens import TokenKind

# ASCII punctuation and symbols, checked before the unicodedata lookup
ASCII_PUNCTUATION: frozenset[str] = frozenset("!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~")

# Information separators str.isspace accepts but Unicode White_Space excludes
NON_WHITESPACE_SEPARATORS: frozenset[str] = frozenset("\x1c\x1d\x1e\x1f")


def is_punctuation(char: str) -> bool:
    """Check if character is Unicode punctuation (Pc, Pd, Pe, Pf, Pi, Po, Ps) or symbol (Sc, Sk, Sm, So)."""
    if not char:
        return False
    if char in ASCII_PUNCTUATION:
        return True
    cat = unicodedata.category(char)
    # P* = Punctuation, S* = Symbol
    return cat.startswith("P") or cat.startswith("S")


def is_whitespace(char: str) -> bool:
    """Check if character is Unicode whitespace.

    Matches the Unicode White_Space property: ASCII whitespace, ``\\x85``
    and the Zs/Zl/Zp separators. The information separators
    ``\\x1c``-``\\x1f`` are not whitespace.
    """
    if not char:
        return False
    return char.isspace() and char not in NON_WHITESPACE_SEPARATORS


def classify(char: str) -> TokenKind | None:
    """Return the run kind a single character starts.

    Args:
        char: A single character, or "" at end of input.

    Returns:
        The TokenKind for the character, or None at end of input.
    """
    if not char:
        return None
    if is_punctuation(char):
        return TokenKind.PUNCTUATION
    if is_whitespace(char):
        return TokenKind.WHITESPACE
    return TokenKind.WORD


__all__ = [
    "ASCII_PUNCTUATION",
    "NON_WHITESPACE_SEPARATORS",
    "classify",
    "is_punctuation",
    "is_whitespace",
]
