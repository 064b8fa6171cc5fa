"""In-memory document store."""
from __future__ import annotations

import logging
import threading
import uuid
from collections.abc import Callable
from datetime import datetime, timezone

from docstash.exceptions import DuplicateDocumentError
from docstash.models import Document, as_utc

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Return the current instant as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class CounterIdGenerator:
    """Issues "1", "2", ... for a single store instance."""

    def __init__(self, start: int = 1):
        self._next = start

    def __call__(self) -> str:
        value = str(self._next)
        self._next += 1
        return value


def uuid_id_generator() -> str:
    """Issue a random hex identifier."""
    return uuid.uuid4().hex


def make_id_generator(strategy: str) -> Callable[[], str]:
    """Build an id generator for the given strategy name."""
    if strategy == "counter":
        return CounterIdGenerator()
    if strategy == "uuid":
        return uuid_id_generator
    raise ValueError(f"Unknown id strategy: {strategy!r}")


class DocumentStore:
    """Unique-id keyed document collection.

    All access goes through an internal lock: ``save`` performs the duplicate
    check, id assignment and insert atomically, and reads see a consistent
    view of the map. Saved documents are stored as copies, the caller's
    instance is never modified.
    """

    def __init__(
        self,
        id_generator: Callable[[], str] | None = None,
        clock: Clock | None = None,
    ):
        self._documents: dict[str, Document] = {}
        self._lock = threading.Lock()
        self._generate_id = id_generator or CounterIdGenerator()
        self._clock = clock or utc_now

    def save(self, document: Document) -> Document:
        """Insert a document, assigning its id (if absent) and creation time.

        Raises:
            DuplicateDocumentError: If the document carries an id that is
                already stored. The store is left unchanged.
        """
        with self._lock:
            if document.id is not None and document.id in self._documents:
                logger.warning("Rejected duplicate document id %s", document.id)
                raise DuplicateDocumentError(document.id)

            document_id = document.id if document.id is not None else self._next_free_id()
            stored = document.model_copy(
                update={"id": document_id, "created": as_utc(self._clock())}
            )
            self._documents[document_id] = stored

        logger.debug("Saved document %s (%r)", document_id, stored.title)
        return stored

    def _next_free_id(self) -> str:
        # Skip ids a caller already claimed explicitly.
        candidate = self._generate_id()
        while candidate in self._documents:
            candidate = self._generate_id()
        return candidate

    def find_by_id(self, document_id: str) -> Document | None:
        """Get a document by ID, or None if it is not stored."""
        with self._lock:
            return self._documents.get(document_id)

    def snapshot(self) -> list[Document]:
        """Return the stored documents in insertion order."""
        with self._lock:
            return list(self._documents.values())

    def count(self) -> int:
        """Return the number of documents."""
        with self._lock:
            return len(self._documents)

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, document_id: object) -> bool:
        with self._lock:
            return document_id in self._documents
