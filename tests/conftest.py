"""
Pytest configuration for the user records store.

Provides fixtures for:
- Storage files seeded with known content
- Settings isolation from the developer's environment
- Logging handler cleanup between tests
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Callable, Generator, List

import pytest

from user_records.config import get_settings

ALICE = {"id": "1", "email": "a@x.com", "age": 30}
BOB = {"id": "2", "email": "b@x.com", "age": 41}


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Clear the settings cache and pin logging-related env vars for each test.
    """
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_JSON", raising=False)
    monkeypatch.delenv("STORAGE_FILE_MODE", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_root_logging() -> Generator[None, None, None]:
    """
    Drop root handlers installed during a test so a captured stream is not reused.
    """
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def storage_path(tmp_path: Path) -> Path:
    """Path to a storage file that does not exist yet."""
    return tmp_path / "users.json"


@pytest.fixture
def make_storage(tmp_path: Path) -> Callable[[List[dict]], Path]:
    """
    Factory writing the given records as a compact JSON array.
    """

    def _make(records: List[dict], name: str = "users.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(records, separators=(",", ":")), encoding="utf-8")
        return path

    return _make


@pytest.fixture
def two_users_file(make_storage: Callable[[List[dict]], Path]) -> Path:
    """Storage file holding ALICE then BOB."""
    return make_storage([ALICE, BOB])
