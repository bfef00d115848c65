"""
Dispatcher mapping an operation name onto the record store.

Usage (example from CLI):
    import sys
    from user_records.dispatcher import Arguments, perform

    perform(Arguments(file_name="users.json", operation="list"), sys.stdout)

`list` and `findById` only read the storage file. `add` and `remove` rewrite
it when the collection changes and then echo the persisted array.
"""

from __future__ import annotations

from typing import BinaryIO, Callable, Dict, List, TextIO

from pydantic import BaseModel, Field

from user_records.errors import MissingArgumentError, UnsupportedOperationError
from user_records.infrastructure.storage import (
    DEFAULT_FILE_MODE,
    MutationResult,
    append_user,
    encode_user,
    encode_users,
    find_user_index,
    load_users,
    open_storage,
    parse_new_user,
    remove_user,
    save_users,
)
from user_records.utils.logging import get_logger

log = get_logger(__name__)


class Arguments(BaseModel):
    """
    Parsed command-line flags. An empty string means the flag was not given.
    """

    file_name: str = Field("", description="Path to the JSON storage file.")
    operation: str = Field("", description="One of add, list, findById, remove.")
    id: str = Field("", description="User id for findById and remove.")
    item: str = Field("", description="JSON object with id, email and age for add.")

    model_config = {"frozen": True}


OperationHandler = Callable[[Arguments, BinaryIO, TextIO], None]


def _commit(result: MutationResult, storage: BinaryIO, writer: TextIO) -> None:
    if not result.changed:
        writer.write(result.message or "")
        return
    data = save_users(result.users, storage)
    writer.write(data.decode("utf-8"))


def _add(args: Arguments, storage: BinaryIO, writer: TextIO) -> None:
    if not args.item:
        raise MissingArgumentError("item")
    user = parse_new_user(args.item)
    _commit(append_user(user, load_users(storage)), storage, writer)


def _list(args: Arguments, storage: BinaryIO, writer: TextIO) -> None:
    writer.write(encode_users(load_users(storage)).decode("utf-8"))


def _find_by_id(args: Arguments, storage: BinaryIO, writer: TextIO) -> None:
    if not args.id:
        raise MissingArgumentError("id")
    users = load_users(storage)
    index = find_user_index(args.id, users)
    if index is None:
        log.debug("No user matched", extra={"user_id": args.id})
        return
    writer.write(encode_user(users[index]).decode("utf-8"))


def _remove(args: Arguments, storage: BinaryIO, writer: TextIO) -> None:
    if not args.id:
        raise MissingArgumentError("id")
    _commit(remove_user(args.id, load_users(storage)), storage, writer)


def _operation_handlers() -> Dict[str, OperationHandler]:
    """Registry of available operations."""
    return {
        "add": _add,
        "list": _list,
        "findById": _find_by_id,
        "remove": _remove,
    }


def available_operations() -> List[str]:
    """List available operation names."""
    return sorted(_operation_handlers().keys())


def _resolve_operation(name: str) -> OperationHandler:
    handlers = _operation_handlers()
    if name not in handlers:
        raise UnsupportedOperationError(name)
    return handlers[name]


def perform(args: Arguments, writer: TextIO, file_mode: int = DEFAULT_FILE_MODE) -> None:
    """
    Run the requested operation against the storage file.

    Parameters
    ----------
    args : Arguments
        Validated command-line flags.
    writer : TextIO
        Destination for JSON results and soft diagnostics.
    file_mode : int
        Permission bits used if the storage file has to be created.

    Raises
    ------
    UserRecordsError
        Any missing flag, unknown operation, decode or I/O failure.
    """
    if not args.file_name:
        raise MissingArgumentError("fileName")
    if not args.operation:
        raise MissingArgumentError("operation")

    # Resolve first: an unknown operation must not create or touch the file.
    handler = _resolve_operation(args.operation)

    log.debug(
        f"[OPERATION] {args.operation}",
        extra={"operation": args.operation, "file_name": args.file_name},
    )
    with open_storage(args.file_name, file_mode) as storage:
        handler(args, storage, writer)


__all__ = [
    "Arguments",
    "available_operations",
    "perform",
]
