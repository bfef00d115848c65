from __future__ import annotations

import io
import sys

import typer

from user_records.config import get_settings
from user_records.dispatcher import Arguments, perform
from user_records.errors import UserRecordsError
from user_records.utils.logging import configure_logging, get_logger

log = get_logger(__name__)

app = typer.Typer(
    help="Manage a list of user records stored as a JSON array.",
    add_completion=False,
)


@app.command()
def run(
    file_name: str = typer.Option(
        "",
        "-fileName",
        "--fileName",
        help="users list in json format",
    ),
    operation: str = typer.Option(
        "",
        "-operation",
        "--operation",
        help="available operations are: «add», «list», «findById», «remove»",
    ),
    user_id: str = typer.Option(
        "",
        "-id",
        "--id",
        help="user ID",
    ),
    item: str = typer.Option(
        "",
        "-item",
        "--item",
        help="valid json object with the id, email and age fields",
    ),
) -> None:
    """
    Add, list, find or remove user records in a JSON storage file.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)

    args = Arguments(file_name=file_name, operation=operation, id=user_id, item=item)
    buffer = io.StringIO()
    try:
        perform(args, buffer, file_mode=settings.file_mode)
    except UserRecordsError as exc:
        log.debug(
            f"[OPERATION FAILED] {operation or '-'}",
            extra={"operation": operation, "error_type": type(exc).__name__},
        )
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    output = buffer.getvalue()
    if output:
        typer.echo(output)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
