"""Threaded producer/consumer handoff for scanner tokens.

A TokenChannel runs one Scanner on a dedicated producer thread and hands
tokens to a single consumer through a ``queue.Queue``. With the default
buffer of 1 the producer is never more than one token ahead of the
consumer; a buffer of 0 lets it run ahead without bound. Tokens are never
dropped or reordered.

The producer stops right after it puts EOF. The consumer stops once it
has received EOF; reading again is a logic error.

Usage:
    >>> with TokenChannel("hi there") as channel:
    ...     for token in channel:
    ...         print(token)
{WORD 'hi' 0}
{SPACE ' ' 2}
{WORD 'there' 3}
{EOF '' 8}

Thread Safety:
One producer thread and one consumer. The scanner cursor lives on the
producer thread only; the queue is the only shared object.

"""

from __future__ import annotations

import queue
import threading
from collections.abc import Iterator
from dataclasses import dataclass

from wordscan.config import get_scan_config
from wordscan.errors import ChannelClosedError, ChannelError, ChannelStateError
from wordscan.lexer import Scanner
from wordscan.tokens import Token, TokenKind
from wordscan.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class _ProducerFailure:
    """Queue item carrying an exception raised on the producer thread."""

    exc: BaseException


class TokenChannel:
    """Single-producer, single-consumer token handoff backed by a thread."""

    def __init__(self, source: str, *, maxsize: int | None = None) -> None:
        """Create a channel for one source string.

        The scanner is created here, on the caller's thread, so it picks up
        the caller's active ScanConfig.

        Args:
            source: Text to scan
            maxsize: Queue size; defaults to ScanConfig.channel_buffer.
                0 means unbounded.
        """
        if maxsize is None:
            maxsize = get_scan_config().channel_buffer
        if maxsize < 0:
            raise ValueError(f"maxsize must be >= 0, got {maxsize}")

        self._scanner = Scanner(source)
        self._queue: queue.Queue[Token | _ProducerFailure] = queue.Queue(maxsize)
        self._thread: threading.Thread | None = None
        self._closed = False

    @property
    def maxsize(self) -> int:
        return self._queue.maxsize

    @property
    def closed(self) -> bool:
        """True once the consumer has received EOF."""
        return self._closed

    def start(self) -> TokenChannel:
        """Spawn the producer thread.

        Raises:
            ChannelStateError: If the channel was already started.
        """
        if self._thread is not None:
            raise ChannelStateError("TokenChannel already started")
        self._thread = threading.Thread(
            target=self._produce, name="wordscan-producer", daemon=True
        )
        self._thread.start()
        return self

    def _produce(self) -> None:
        logger.debug("Producer started (maxsize=%d)", self._queue.maxsize)
        try:
            for token in self._scanner.tokenize():
                self._queue.put(token)
        except Exception as exc:
            logger.exception("Producer failed")
            self._queue.put(_ProducerFailure(exc))
            return
        logger.debug("Producer finished")

    def receive(self) -> Token:
        """Block until the next token is available and return it.

        Raises:
            ChannelStateError: If the channel was never started.
            ChannelClosedError: If EOF was already received.
            ChannelError: If the producer thread failed.
        """
        if self._closed:
            raise ChannelClosedError("Cannot receive after EOF")
        if self._thread is None:
            raise ChannelStateError("TokenChannel not started")

        item = self._queue.get()
        if isinstance(item, _ProducerFailure):
            self._closed = True
            raise ChannelError(f"Producer failed: {item.exc}") from item.exc
        if item.kind is TokenKind.EOF:
            self._closed = True
        return item

    def __iter__(self) -> Iterator[Token]:
        while not self._closed:
            yield self.receive()

    def join(self, timeout: float | None = None) -> None:
        """Wait for the producer thread to finish."""
        if self._thread is not None:
            self._thread.join(timeout)

    def close(self) -> None:
        """Drain any unread tokens so the producer can finish, then join."""
        if self._thread is None:
            return
        while not self._closed:
            self.receive()
        self.join()

    def __enter__(self) -> TokenChannel:
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def scan_concurrently(source: str, *, maxsize: int | None = None) -> Iterator[Token]:
    """Scan ``source`` on a producer thread and yield tokens as they arrive.

    Yields every token up to and including EOF.
    """
    with TokenChannel(source, maxsize=maxsize) as channel:
        yield from channel


__all__ = ["TokenChannel", "scan_concurrently"]
