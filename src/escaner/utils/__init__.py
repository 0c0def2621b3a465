"""Utility modules for Escaner.

Provides:
- logger: get_logger for logging
"""

from escaner.utils.logger import get_logger

__all__ = ["get_logger"]
