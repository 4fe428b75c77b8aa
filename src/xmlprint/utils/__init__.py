"""Utility modules for xmlprint.

Provides:
- logger: get_logger for logging
"""

from xmlprint.utils.logger import get_logger

__all__ = [
    "get_logger",
]
