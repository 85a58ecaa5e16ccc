"""ContextVar-based scan configuration for wordscan.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The scanner and the token channel read the active config when they are
created; nothing is passed through call signatures.

Usage:
    from wordscan.config import ScanConfig, scan_config_context

    with scan_config_context(ScanConfig(trace_tokens=True)):
        tokens = scan("hello, world")

"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        channel_buffer: Queue size for TokenChannel handoff. 1 keeps the
            producer at most one token ahead; 0 means unbounded.
        trace_tokens: Log every emitted token at DEBUG level

    """

    channel_buffer: int = 1
    trace_tokens: bool = False

    def __post_init__(self) -> None:
        if self.channel_buffer < 0:
            raise ValueError(f"channel_buffer must be >= 0, got {self.channel_buffer}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> ScanConfig:
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ScanConfig.from_dict({"trace_tokens": True, "other": 1})
            >>> config.trace_tokens
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (thread-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to the module-level default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with scan_config_context(ScanConfig(channel_buffer=0)):
        ...     get_scan_config().channel_buffer
        0
    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
