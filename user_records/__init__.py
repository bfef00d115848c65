"""
User Records - a command-line store for user entries kept in a JSON file.

The storage file holds a JSON array of users (`id`, `email`, `age`). Each
invocation performs one operation:

- add: append a user unless its id is already present
- list: print the whole collection
- findById: print one user, or nothing
- remove: drop a user by id

The collection is loaded in full, changed in memory and written back by
truncating and rewriting the file.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from user_records.config import Settings, get_settings
from user_records.dispatcher import Arguments, available_operations, perform
from user_records.domain.models import User
from user_records.errors import (
    DecodeError,
    MissingArgumentError,
    StorageIOError,
    UnsupportedOperationError,
    UserRecordsError,
)
from user_records.infrastructure.storage import (
    MutationResult,
    add_user,
    find_user_index,
    load_users,
    open_storage,
    remove_user,
    save_users,
)
from user_records.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Dispatch
    "Arguments",
    "available_operations",
    "perform",
    # Domain
    "User",
    # Record store
    "MutationResult",
    "add_user",
    "find_user_index",
    "load_users",
    "open_storage",
    "remove_user",
    "save_users",
    # Errors
    "DecodeError",
    "MissingArgumentError",
    "StorageIOError",
    "UnsupportedOperationError",
    "UserRecordsError",
    # Logging
    "configure_logging",
    "get_logger",
]
