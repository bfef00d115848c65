"""
Synthetic data generator for the user records store.

Writes a deterministic pseudo-random collection to a storage file through the
record store, so the result is exactly what the CLI itself would persist.
"""

from __future__ import annotations

import random
import sys
from pathlib import Path

import typer

from user_records.domain.models import User
from user_records.infrastructure.storage import open_storage, save_users

app = typer.Typer(help="Generate a synthetic users storage file.")


def _generate_users(count: int, seed: int) -> list[User]:
    rng = random.Random(seed)
    return [
        User(id=str(n), email=f"user{n}@example.com", age=rng.randint(18, 90))
        for n in range(1, count + 1)
    ]


@app.command()
def main(
    output: Path = typer.Option(
        ...,
        "--output",
        "-o",
        help="Storage file to (over)write.",
    ),
    count: int = typer.Option(
        10,
        "--count",
        "-c",
        min=0,
        help="Number of users to generate.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
) -> None:
    """
    Generate users and write them to OUTPUT as a JSON array.
    """
    output.parent.mkdir(parents=True, exist_ok=True)
    users = _generate_users(count, seed)
    with open_storage(str(output)) as handle:
        data = save_users(users, handle)
    typer.echo(f"Wrote {len(users):,} users -> {output} ({len(data):,} bytes, seed={seed})")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
