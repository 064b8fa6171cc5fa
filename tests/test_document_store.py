"""Tests for the in-memory DocumentStore."""
from __future__ import annotations

import threading
from datetime import datetime, timezone

import pytest

from docstash.exceptions import DuplicateDocumentError
from docstash.models import Document, SearchRequest
from docstash.search import search
from docstash.storage.document_store import (
    CounterIdGenerator,
    DocumentStore,
    make_id_generator,
    uuid_id_generator,
)


class TestSave:
    """Tests for DocumentStore.save."""

    def test_save_assigns_id_and_created(self, store, clock, document_one):
        saved = store.save(document_one)

        assert saved.id is not None
        assert saved.created == clock.now
        assert saved.is_persisted
        assert saved.title == "Document One"

    def test_save_does_not_mutate_input(self, store, document_one):
        store.save(document_one)

        assert document_one.id is None
        assert document_one.created is None

    def test_generated_ids_are_unique(self, store, document_one):
        ids = {store.save(document_one).id for _ in range(5)}
        assert len(ids) == 5
        assert store.count() == 5

    def test_save_keeps_explicit_id(self, store, taras):
        saved = store.save(Document(id="abc", title="t", content="c", author=taras))
        assert saved.id == "abc"
        assert store.find_by_id("abc") == saved

    def test_save_overwrites_caller_created(self, store, clock, taras):
        doc = Document(
            title="t", content="c", author=taras, created=clock.now.replace(year=1999)
        )
        assert store.save(doc).created == clock.now

    def test_naive_clock_is_stored_as_utc(self, document_one):
        store = DocumentStore(clock=lambda: datetime(2024, 5, 1, 12, 0))

        saved = store.save(document_one)

        assert saved.created == datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        results = search(store.snapshot(), SearchRequest(created_from=datetime(2000, 1, 1)))
        assert results == [saved]

    def test_duplicate_id_raises_and_leaves_store_unchanged(self, store, taras):
        original = store.save(Document(id="1", title="First", content="c", author=taras))
        count_before = store.count()

        with pytest.raises(DuplicateDocumentError) as exc_info:
            store.save(Document(id="1", title="Second", content="c", author=taras))

        assert exc_info.value.document_id == "1"
        assert "Document already exists" in str(exc_info.value)
        assert store.count() == count_before == 1
        assert store.find_by_id("1") == original

    def test_resaving_returned_document_is_duplicate(self, store, document_one):
        saved = store.save(document_one)
        with pytest.raises(DuplicateDocumentError):
            store.save(saved)

    def test_generated_id_skips_explicitly_claimed_ids(self, store, taras, document_one):
        store.save(Document(id="1", title="t", content="c", author=taras))
        store.save(Document(id="2", title="t", content="c", author=taras))

        generated = store.save(document_one)

        assert generated.id == "3"
        assert store.count() == 3

    def test_explicit_id_clashing_with_generated_id_is_duplicate(self, store, taras, document_one):
        generated = store.save(document_one)
        with pytest.raises(DuplicateDocumentError):
            store.save(Document(id=generated.id, title="t", content="c", author=taras))

    def test_stores_are_independent(self, document_one):
        first = DocumentStore()
        second = DocumentStore()

        assert first.save(document_one).id == "1"
        assert second.save(document_one).id == "1"

    def test_concurrent_saves_with_same_id_store_one(self, store, taras):
        errors: list[Exception] = []
        barrier = threading.Barrier(8)

        def worker() -> None:
            barrier.wait()
            try:
                store.save(Document(id="shared", title="t", content="c", author=taras))
            except DuplicateDocumentError as e:
                errors.append(e)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert store.count() == 1
        assert len(errors) == 7


class TestReads:
    """Tests for find_by_id and snapshot."""

    def test_find_by_id_returns_saved_document(self, store, document_one):
        saved = store.save(document_one)
        assert store.find_by_id(saved.id) == saved

    def test_find_by_id_missing_returns_none(self, store):
        assert store.find_by_id("nonexistent") is None

    def test_find_by_id_is_repeatable(self, store, document_one):
        saved = store.save(document_one)
        assert store.find_by_id(saved.id) == store.find_by_id(saved.id)

    def test_snapshot_is_insertion_ordered(self, store, document_one, document_two):
        store.save(document_two)
        store.save(document_one)

        assert [doc.title for doc in store.snapshot()] == ["Document Two", "Document One"]

    def test_snapshot_is_a_copy(self, store, document_one):
        snapshot = store.snapshot()
        store.save(document_one)
        assert snapshot == []
        assert len(store) == 1

    def test_contains(self, store, document_one):
        saved = store.save(document_one)
        assert saved.id in store
        assert "missing" not in store


class TestIdGenerators:
    """Tests for id generation strategies."""

    def test_counter_starts_at_one(self):
        generate = CounterIdGenerator()
        assert [generate(), generate(), generate()] == ["1", "2", "3"]

    def test_uuid_ids_are_hex(self):
        value = uuid_id_generator()
        assert len(value) == 32
        int(value, 16)

    def test_make_id_generator(self):
        assert isinstance(make_id_generator("counter"), CounterIdGenerator)
        assert make_id_generator("uuid") is uuid_id_generator

    def test_make_id_generator_unknown_strategy(self):
        with pytest.raises(ValueError, match="Unknown id strategy"):
            make_id_generator("sequence")

    def test_store_with_uuid_generator(self, document_one):
        store = DocumentStore(id_generator=uuid_id_generator)
        first = store.save(document_one)
        second = store.save(document_one)
        assert first.id != second.id
        assert len(first.id) == 32
