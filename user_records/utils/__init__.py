"""
Utilities package for the user records store.

Exports shared logging helpers. Keep this package free of domain logic.
"""

from user_records.utils.logging import JsonFormatter, configure_logging, get_logger

__all__ = [
    "JsonFormatter",
    "configure_logging",
    "get_logger",
]
