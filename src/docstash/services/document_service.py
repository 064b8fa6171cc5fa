"""Document service for docstash."""
from __future__ import annotations

import logging

from docstash.config import DocstashConfig, get_config
from docstash.models import Document, SearchRequest
from docstash.search import SearchOrder, search
from docstash.storage import DocumentStore, make_id_generator

logger = logging.getLogger(__name__)


class DocumentService:
    """Service for saving, fetching and searching documents."""

    def __init__(
        self,
        store: DocumentStore | None = None,
        config: DocstashConfig | None = None,
    ):
        self.config = config or get_config()
        if store is None:
            store = DocumentStore(
                id_generator=make_id_generator(self.config.id_strategy)
            )
        self.store = store
        self.search_order = SearchOrder(self.config.search_order)

    def save(self, document: Document) -> Document:
        """Save a document, returning the stored copy with id and created set.

        Raises DuplicateDocumentError if the document's id is already stored.
        """
        return self.store.save(document)

    def find_by_id(self, document_id: str) -> Document | None:
        """Find a document by ID. Returns None when it does not exist."""
        return self.store.find_by_id(document_id)

    def search(self, request: SearchRequest | None = None) -> list[Document]:
        """Search stored documents.

        Args:
            request: Filter to apply. None (or an empty request) returns
                every stored document.
        """
        if request is None:
            request = SearchRequest()
        if request.is_empty():
            logger.debug("Empty search request, returning every stored document")
        return search(self.store.snapshot(), request, order=self.search_order)

    def count(self) -> int:
        """Return the number of stored documents."""
        return self.store.count()
