"""Token and TokenKind definitions for the wordscan scanner.

The scanner produces a stream of Token objects that a consumer drains.
Each Token has the exact text it consumed, its start offset, and its kind.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType


class TokenKind(Enum):
    """Token kinds produced by the scanner.

    The set is closed: every character of the input belongs to exactly one
    of the three run kinds, and EOF marks the end of the stream.

    """

    WORD = auto()  # Letters, and anything not covered below
    WHITESPACE = auto()  # Unicode whitespace
    PUNCTUATION = auto()  # Unicode punctuation and symbols
    EOF = auto()  # End of input, always last

    @property
    def label(self) -> str:
        """Display label used by the diagnostic rendering."""
        return _LABELS[self]


_LABELS = MappingProxyType(
    {
        TokenKind.WORD: "WORD",
        TokenKind.WHITESPACE: "SPACE",
        TokenKind.PUNCTUATION: "PUNCTUATION",
        TokenKind.EOF: "EOF",
    }
)


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the scanner.

    Attributes:
        text: The exact substring consumed (empty for EOF)
        offset: Zero-based index in the source where ``text`` begins.
            For EOF this is the source length.
        kind: The token kind (from TokenKind enum)

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    text: str
    offset: int
    kind: TokenKind

    @property
    def end(self) -> int:
        """Offset one past the last consumed character."""
        return self.offset + len(self.text)

    def __str__(self) -> str:
        return render(self)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        text = self.text
        if len(text) > 20:
            text = text[:17] + "..."
        return f"Token({self.kind.name}, {text!r}, {self.offset})"


def render(token: Token) -> str:
    """Render a token in its diagnostic display form.

    The text is written verbatim between single quotes, so golden output
    stays byte-for-byte stable.

    Example:
        >>> render(Token("This", 0, TokenKind.WORD))
        "{WORD 'This' 0}"
    """
    return f"{{{token.kind.label} '{token.text}' {token.offset}}}"


__all__ = ["Token", "TokenKind", "render"]
