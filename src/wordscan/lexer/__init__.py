"""State-machine scanner for wordscan.

Architecture:
lexer/
├── __init__.py          # Re-exports Scanner, ScannerState
├── core.py              # Scanner class (cursor, transitions, emission)
└── modes.py             # ScannerState enum

Usage:
    >>> from wordscan.lexer import Scanner
    >>> for token in Scanner("hi, you").tokenize():
    ...     print(token)
{WORD 'hi' 0}
{PUNCTUATION ',' 2}
{SPACE ' ' 3}
{WORD 'you' 4}
{EOF '' 7}

"""

from wordscan.lexer.core import Scanner
from wordscan.lexer.modes import ScannerState

__all__ = ["Scanner", "ScannerState"]
