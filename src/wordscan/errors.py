"""Exception classes for wordscan.

Scanning itself cannot fail: every character belongs to some run kind.
The errors below signal programming mistakes, such as reading past the
end-of-input token, and are never caught inside the library.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wordscan.lexer.modes import ScannerState


class WordscanError(Exception):
    """Base exception for all wordscan errors.
    
    Subclass this for specific error categories.
    """

    pass


class ScannerStateError(WordscanError, RuntimeError):
    """Scanner used outside its lifecycle.
    
    Raised when a single-use scanner is driven again after it has
    already started or finished.
    """

    def __init__(
        self,
        message: str,
        state: ScannerState | None = None,
        position: int | None = None,
    ) -> None:
        """Initialize scanner state error.
        
        Args:
            message: Error description
            state: Scanner state at the time of the misuse
            position: Cursor position at the time of the misuse
        """
        self.message = message
        self.state = state
        self.position = position

        details = []
        if state is not None:
            details.append(f"state={state.name}")
        if position is not None:
            details.append(f"position={position}")
        suffix = f" ({', '.join(details)})" if details else ""

        super().__init__(f"{message}{suffix}")


class ScannerExhaustedError(ScannerStateError):
    """Token requested after the end-of-input token was emitted."""

    pass


class ChannelError(WordscanError):
    """Error in the threaded token handoff."""

    pass


class ChannelStateError(ChannelError, RuntimeError):
    """Channel used outside its lifecycle (e.g. started twice)."""

    pass


class ChannelClosedError(ChannelError, RuntimeError):
    """Consumer read past the end-of-input token."""

    pass
