"""
Domain package for the user records store.

Exports the record model shared by the storage layer and the dispatcher.
"""

from user_records.domain.models import User

__all__ = [
    "User",
]
