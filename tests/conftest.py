from __future__ import annotations

from datetime import UTC, datetime

import pytest

from listcounter.filestore import FileStore
from listcounter.models import Record, Settings
from listcounter.store import Store


@pytest.fixture
def files(tmp_path):
    return FileStore(tmp_path / "go-listcounter")


@pytest.fixture
def make_store():
    def _make(counts: dict[str, int] | None = None, *, name: str = "test", rule=None) -> Store:
        settings = Settings(name=name, edited=datetime(2024, 5, 1, 12, 0, tzinfo=UTC), rule=rule)
        return Store(settings, [Record(k, v) for k, v in (counts or {}).items()])
    return _make
