"""Pytest configuration and fixtures for docstash tests."""
from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime, timedelta, timezone

import pytest

from docstash.config import DocstashConfig, get_config
from docstash.models import Author, Document
from docstash.storage.document_store import DocumentStore

FIXED_NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    """Controllable clock returning a settable instant."""

    def __init__(self, now: datetime = FIXED_NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now = self.now + timedelta(seconds=seconds)


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep DOCSTASH_* variables from the environment out of tests."""
    for name in ("DOCSTASH_ID_STRATEGY", "DOCSTASH_SEARCH_ORDER", "DOCSTASH_VERBOSE"):
        monkeypatch.delenv(name, raising=False)
    get_config(clear_cache=True)
    yield
    monkeypatch.undo()
    get_config(clear_cache=True)


@pytest.fixture
def clock() -> FakeClock:
    """Create a fake clock pinned to FIXED_NOW."""
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> DocumentStore:
    """Create an empty store using the fake clock."""
    return DocumentStore(clock=clock)


@pytest.fixture
def mock_config() -> DocstashConfig:
    """Create a config with default settings."""
    return DocstashConfig(id_strategy="counter", search_order="insertion", verbose=False)


@pytest.fixture
def taras() -> Author:
    return Author(id="1", name="Taras")


@pytest.fixture
def larysa() -> Author:
    return Author(id="2", name="Larysa")


@pytest.fixture
def document_one(taras: Author) -> Document:
    """Unsaved sample document by author 1."""
    return Document(title="Document One", content="lyrics", author=taras)


@pytest.fixture
def document_two(larysa: Author) -> Document:
    """Unsaved sample document by author 2."""
    return Document(title="Document Two", content="writings", author=larysa)
