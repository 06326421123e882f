from __future__ import annotations

import os
import sys
import uuid
from datetime import datetime, timedelta, timezone

import pytest


def _ensure_project_root_on_path() -> None:
    # The modules live at the repository root; make them importable when
    # pytest is started from elsewhere.
    project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    if project_root not in sys.path:
        sys.path.insert(0, project_root)


_ensure_project_root_on_path()

from database import DataError, Database, Project  # noqa: E402
from settings import Settings  # noqa: E402


def make_projects(count: int, start: int = 0) -> list[Project]:
    """Detached Project rows, not bound to any session."""
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return [
        Project(
            id=str(uuid.uuid4()),
            name=f"Project {i}",
            description=f"Description {i}",
            created=base + timedelta(minutes=i),
            edited=base + timedelta(minutes=i),
        )
        for i in range(start, start + count)
    ]


class FakeDataPort:
    """In-memory data port recording every call."""

    def __init__(self, records: list[Project] | None = None):
        self.records = records or []
        self.calls: list[tuple[int, int]] = []
        self.fail = False

    async def list_records(self, page: int, page_size: int) -> list[Project]:
        self.calls.append((page, page_size))
        if self.fail:
            raise DataError("database is locked")
        start = page * page_size
        return self.records[start:start + page_size]


@pytest.fixture
def data_port():
    return FakeDataPort(make_projects(3))


@pytest.fixture
def db(tmp_path):
    database = Database(str(tmp_path / "taskify.db"))
    yield database
    database.close()


@pytest.fixture
def settings(tmp_path):
    return Settings(str(tmp_path / "config.json"))
