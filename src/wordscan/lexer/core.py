"""State-machine scanner with O(n) guaranteed performance.

Walks the source left to right. Each transition peeks at the next
character, classifies it, consumes the maximal run of characters of the
same class, and emits one token. Exhausting the input emits EOF and moves
the machine to DONE.

No regex in the hot path. Every transition either advances the cursor or
terminates, so scanning always finishes after at most len(source) + 1
emissions.

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from wordscan.charsets import classify
from wordscan.config import get_scan_config
from wordscan.errors import ScannerExhaustedError, ScannerStateError
from wordscan.lexer.modes import ScannerState
from wordscan.tokens import Token, TokenKind
from wordscan.utils.logger import get_logger

logger = get_logger(__name__)


class Scanner:
    """Two-state scanner producing word, whitespace and punctuation runs.

    The cursor is a (start, position) pair: ``start`` is where the token
    under construction begins, ``position`` is the scan head. Emitting a
    token closes the window by moving ``start`` up to ``position``.

    Usage:
            >>> scanner = Scanner("a test, sir")
            >>> [str(t) for t in scanner.tokenize()][:3]
            ["{WORD 'a' 0}", "{SPACE ' ' 1}", "{WORD 'test' 2}"]

    Thread Safety:
        Scanner instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_start",
        "_pos",
        "_state",
        "_emitted",
        "_trace",
    )

    def __init__(self, source: str) -> None:
        """Initialize scanner with source text.

        Args:
            source: The full in-memory text to scan
        """
        self._source = source
        self._source_len = len(source)
        self._start = 0
        self._pos = 0
        self._state = ScannerState.SCANNING
        self._emitted = 0
        self._trace = get_scan_config().trace_tokens

    @property
    def start(self) -> int:
        """Offset where the token under construction begins."""
        return self._start

    @property
    def position(self) -> int:
        """Current scan position."""
        return self._pos

    @property
    def state(self) -> ScannerState:
        return self._state

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into a token stream.

        Yields:
            Token objects one at a time, ending with exactly one EOF token.

        Raises:
            ScannerStateError: If this scanner has already emitted tokens.

        Complexity: O(n) where n = len(source)
        Memory: O(1) iterator (tokens yielded, not accumulated)
        """
        if self._emitted or self._state is ScannerState.DONE:
            raise ScannerStateError(
                "Scanner is single-use; create a new Scanner to rescan",
                state=self._state,
                position=self._pos,
            )

        logger.debug("Scanning %d chars", self._source_len)
        while self._state is ScannerState.SCANNING:
            yield self.next_token()
        logger.debug("Scan finished: %d tokens", self._emitted)

    def next_token(self) -> Token:
        """Run one transition of the machine and return the emitted token.

        Returns:
            The next run token, or EOF once the input is exhausted.

        Raises:
            ScannerExhaustedError: If EOF has already been emitted.
        """
        if self._state is ScannerState.DONE:
            raise ScannerExhaustedError(
                "No tokens remain after EOF",
                state=self._state,
                position=self._pos,
            )

        kind = classify(self._peek())
        if kind is None:
            self._state = ScannerState.DONE
            return self._emit(TokenKind.EOF)

        self._consume_run(kind)
        return self._emit(kind)

    # =========================================================================
    # Cursor helpers
    # =========================================================================

    def _peek(self) -> str:
        """Peek at current character without advancing.

        Returns:
            Current character or empty string at end of input.
        """
        if self._pos >= self._source_len:
            return ""
        return self._source[self._pos]

    def _consume_run(self, kind: TokenKind) -> None:
        """Advance position past the maximal run of ``kind`` characters.

        The character at the current position is known to be of ``kind``,
        so the run is never empty.
        """
        source = self._source  # Local var for faster access
        source_len = self._source_len
        pos = self._pos + 1
        while pos < source_len and classify(source[pos]) is kind:
            pos += 1
        self._pos = pos

    def _emit(self, kind: TokenKind) -> Token:
        """Create a token for the current window and close it."""
        token = Token(self._source[self._start : self._pos], self._start, kind)
        self._start = self._pos
        self._emitted += 1
        if self._trace:
            logger.debug("emit %s", token)
        return token
