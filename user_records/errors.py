"""
Error types raised by the user records store.

Every error is fatal for a CLI invocation; the soft outcomes (duplicate id on
add, unknown id on remove) are not errors and never raise.
"""

from __future__ import annotations


class UserRecordsError(Exception):
    """Base class for all failures surfaced to the CLI."""


class MissingArgumentError(UserRecordsError):
    """A required command-line flag was not given."""

    def __init__(self, flag: str) -> None:
        self.flag = flag
        super().__init__(f"-{flag} flag has to be specified")


class DecodeError(UserRecordsError):
    """Malformed JSON in the storage file or in the -item payload."""


class StorageIOError(UserRecordsError):
    """The storage file could not be opened, read or written."""


class UnsupportedOperationError(UserRecordsError):
    """The -operation value is not a known operation."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Operation {operation} not allowed!")


__all__ = [
    "DecodeError",
    "MissingArgumentError",
    "StorageIOError",
    "UnsupportedOperationError",
    "UserRecordsError",
]
