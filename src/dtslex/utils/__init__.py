"""Utility modules for dtslex.

Provides:
- logger: get_logger for logging
"""

from dtslex.utils.logger import get_logger

__all__ = [
    "get_logger",
]
