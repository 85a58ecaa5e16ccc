"""Utility modules for wordscan.

Provides:
- logger: get_logger for logging
"""

from wordscan.utils.logger import get_logger

__all__ = ["get_logger"]
