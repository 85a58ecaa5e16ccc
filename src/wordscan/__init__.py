"""
wordscan: minimal state-machine scanner for Python

Splits text into maximal runs of words, whitespace and punctuation,
terminated by an EOF token. Zero runtime dependencies.

Quick Start:
    >>> from wordscan import scan
    >>> for token in scan("a test, sir..."):
    ...     print(token)
{WORD 'a' 0}
{SPACE ' ' 1}
{WORD 'test' 2}
{PUNCTUATION ',' 6}
{SPACE ' ' 7}
{WORD 'sir' 8}
{PUNCTUATION '...' 11}
{EOF '' 14}

Concurrent handoff:
    >>> from wordscan import TokenChannel
    >>> with TokenChannel("hello world") as channel:
    ...     tokens = list(channel)
"""

from collections.abc import Iterator

from wordscan.channel import TokenChannel, scan_concurrently
from wordscan.charsets import classify
from wordscan.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from wordscan.errors import (
    ChannelClosedError,
    ChannelError,
    ChannelStateError,
    ScannerExhaustedError,
    ScannerStateError,
    WordscanError,
)
from wordscan.lexer import Scanner, ScannerState
from wordscan.tokens import Token, TokenKind, render

__version__ = "0.1.0"


def tokenize(source: str) -> Iterator[Token]:
    """Lazily tokenize ``source``.

    Args:
        source: Text to scan

    Returns:
        Iterator over tokens, ending with exactly one EOF token
    """
    return Scanner(source).tokenize()


def scan(source: str) -> list[Token]:
    """Tokenize ``source`` eagerly and return every token, EOF included."""
    return list(Scanner(source).tokenize())


__all__ = [
    # Scanning
    "Scanner",
    "ScannerState",
    "TokenChannel",
    "classify",
    "scan",
    "scan_concurrently",
    "tokenize",
    # Tokens
    "Token",
    "TokenKind",
    "render",
    # Configuration
    "ScanConfig",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
    # Errors
    "ChannelClosedError",
    "ChannelError",
    "ChannelStateError",
    "ScannerExhaustedError",
    "ScannerStateError",
    "WordscanError",
    "__version__",
]
