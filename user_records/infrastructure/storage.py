"""
Record store for the user records CLI.

The storage file holds the whole collection as one JSON array. Each invocation
loads it in full, works on the in-memory list and, for mutating operations,
rewrites the file from the start (seek, truncate, write). There is no locking:
concurrent invocations against the same file race and the last writer wins.

Usage:
    from user_records.infrastructure.storage import open_storage, load_users

    with open_storage("users.json") as handle:
        users = load_users(handle)
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from dataclasses import dataclass
from typing import BinaryIO, Generator, List, Optional, Sequence

from pydantic import TypeAdapter, ValidationError

from user_records.domain.models import User
from user_records.errors import DecodeError, StorageIOError
from user_records.utils.logging import get_logger

log = get_logger(__name__)

DEFAULT_FILE_MODE = 0o644

_STORED_USERS = TypeAdapter(Optional[List[User]])
_USER_LIST = TypeAdapter(List[User])

# These only ever occur inside JSON strings, so replacing them is safe.
_HTML_SAFE_ESCAPES = (
    (b"&", b"\\u0026"),
    (b"<", b"\\u003c"),
    (b">", b"\\u003e"),
    ("\u2028".encode("utf-8"), b"\\u2028"),
    ("\u2029".encode("utf-8"), b"\\u2029"),
)


@dataclass(frozen=True)
class MutationResult:
    """
    Outcome of add/remove against an in-memory collection.

    `message` is set for the soft outcomes (duplicate id, unknown id); in that
    case `changed` is False and `users` is the untouched input.
    """

    users: List[User]
    changed: bool
    message: Optional[str] = None


def _describe(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error.get("loc", ()))
        parts.append(f"{loc}: {error['msg']}" if loc else error["msg"])
    return "; ".join(parts)


@contextmanager
def open_storage(path: str, mode: int = DEFAULT_FILE_MODE) -> Generator[BinaryIO, None, None]:
    """
    Open the storage file read-write, creating it if absent.

    Parameters
    ----------
    path : str
        Location of the JSON storage file.
    mode : int
        Permission bits used when the file has to be created.
    """
    try:
        fd = os.open(path, os.O_RDWR | os.O_CREAT, mode)
    except OSError as exc:
        raise StorageIOError(f"cannot open {path}: {exc.strerror or exc}") from exc
    with os.fdopen(fd, "r+b") as handle:
        yield handle


def _html_safe(data: bytes) -> bytes:
    for raw, escaped in _HTML_SAFE_ESCAPES:
        data = data.replace(raw, escaped)
    return data


def encode_users(users: Sequence[User]) -> bytes:
    """
    Compact JSON array of the given users, `[]` when empty.

    `&`, `<`, `>`, U+2028 and U+2029 are written as `\\u` escapes so files
    written by earlier tools round-trip byte for byte.
    """
    return _html_safe(_USER_LIST.dump_json(list(users)))


def encode_user(user: User) -> bytes:
    return _html_safe(user.model_dump_json().encode("utf-8"))


def decode_user(payload: str) -> User:
    """
    Decode a single user from a JSON object string.

    Raises
    ------
    DecodeError
        If the payload is not a JSON object of the expected shape.
    """
    try:
        return User.model_validate_json(payload)
    except ValidationError as exc:
        raise DecodeError(f"invalid item: {_describe(exc)}") from exc


def load_users(source: BinaryIO) -> List[User]:
    """
    Read the whole collection from `source`.

    Empty content yields an empty collection. Anything else must be a JSON
    array of users.
    """
    try:
        data = source.read()
    except OSError as exc:
        raise StorageIOError(f"cannot read storage: {exc}") from exc

    if not data:
        log.debug("Storage is empty", extra={"count": 0})
        return []

    try:
        users = _STORED_USERS.validate_json(data) or []
    except ValidationError as exc:
        raise DecodeError(f"invalid storage content: {_describe(exc)}") from exc

    log.debug("Users loaded", extra={"count": len(users)})
    return users


def save_users(users: Sequence[User], destination: BinaryIO) -> bytes:
    """
    Overwrite `destination` with the encoded collection.

    Returns
    -------
    bytes
        The encoded collection as written.
    """
    data = encode_users(users)
    try:
        destination.seek(0)
        destination.truncate()
        destination.write(data)
        destination.flush()
    except OSError as exc:
        raise StorageIOError(f"cannot write storage: {exc}") from exc
    log.debug("Users saved", extra={"count": len(users), "bytes": len(data)})
    return data


def find_user_index(user_id: str, users: Sequence[User]) -> Optional[int]:
    """Position of the first user with `user_id`, or None."""
    for index, user in enumerate(users):
        if user.id == user_id:
            return index
    return None


def parse_new_user(payload: str) -> User:
    """
    Decode an -item payload into a user ready to be added.

    Raises
    ------
    DecodeError
        If the payload is malformed or carries an empty id.
    """
    user = decode_user(payload)
    if not user.id:
        raise DecodeError('item must have a non-empty "id" field')
    return user


def append_user(user: User, users: Sequence[User]) -> MutationResult:
    """Append `user` unless its id is already taken."""
    if find_user_index(user.id, users) is not None:
        log.info("Duplicate user id", extra={"user_id": user.id})
        return MutationResult(
            users=list(users),
            changed=False,
            message=f"Item with id {user.id} already exists",
        )

    return MutationResult(users=[*users, user], changed=True)


def add_user(payload: str, users: Sequence[User]) -> MutationResult:
    """Decode `payload` and append it unless its id is already taken."""
    return append_user(parse_new_user(payload), users)


def remove_user(user_id: str, users: Sequence[User]) -> MutationResult:
    """Drop the user with `user_id`, keeping the order of the others."""
    index = find_user_index(user_id, users)
    if index is None:
        log.info("User not found", extra={"user_id": user_id})
        return MutationResult(
            users=list(users),
            changed=False,
            message=f"Item with id {user_id} not found",
        )

    remaining = list(users)
    del remaining[index]
    return MutationResult(users=remaining, changed=True)


__all__ = [
    "DEFAULT_FILE_MODE",
    "MutationResult",
    "add_user",
    "append_user",
    "decode_user",
    "encode_user",
    "encode_users",
    "find_user_index",
    "load_users",
    "open_storage",
    "parse_new_user",
    "remove_user",
    "save_users",
]
