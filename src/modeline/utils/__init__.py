"""Utility modules for modeline.

Provides:
- logger: get_logger for logging
"""

from modeline.utils.logger import get_logger

__all__ = [
    "get_logger",
]
