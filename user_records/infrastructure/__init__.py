"""
Infrastructure package for the user records store.

Owns the storage file: opening it, loading and rewriting the collection, and
the in-memory lookups and mutations performed between the two.
"""

from user_records.infrastructure.storage import (
    MutationResult,
    add_user,
    find_user_index,
    load_users,
    open_storage,
    remove_user,
    save_users,
)

__all__ = [
    "MutationResult",
    "add_user",
    "find_user_index",
    "load_users",
    "open_storage",
    "remove_user",
    "save_users",
]
