"""Multi-criterion search over a snapshot of stored documents.

A document matches a request when it satisfies every criterion group
(title, content, author, created range). Within a group, one matching
value is enough. A group left as ``None`` does not filter; a group given
as an empty sequence matches nothing.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum

from docstash.models import Document, SearchRequest

logger = logging.getLogger(__name__)


class SearchOrder(str, Enum):
    """Ordering applied to search results."""

    INSERTION = "insertion"
    ID = "id"


def title_matches(request: SearchRequest, doc: Document) -> bool:
    return request.title_prefixes is None or any(
        doc.title.startswith(prefix) for prefix in request.title_prefixes
    )


def content_matches(request: SearchRequest, doc: Document) -> bool:
    return request.contains_contents is None or any(
        fragment in doc.content for fragment in request.contains_contents
    )


def author_matches(request: SearchRequest, doc: Document) -> bool:
    return request.author_ids is None or any(
        doc.author.id == author_id for author_id in request.author_ids
    )


def created_matches(request: SearchRequest, doc: Document) -> bool:
    """Check the inclusive created range; each bound is optional."""
    if request.created_from is None and request.created_to is None:
        return True
    if doc.created is None:
        return False
    if request.created_from is not None and doc.created < request.created_from:
        return False
    if request.created_to is not None and doc.created > request.created_to:
        return False
    return True


_CRITERIA = (title_matches, content_matches, author_matches, created_matches)


def matches(request: SearchRequest, doc: Document) -> bool:
    """Return True if the document satisfies every criterion group."""
    return all(criterion(request, doc) for criterion in _CRITERIA)


def _id_sort_key(doc: Document) -> tuple[int, int, str]:
    # Numeric ids in numeric order, then everything else lexicographically.
    doc_id = doc.id or ""
    if doc_id.isascii() and doc_id.isdigit():
        return (0, int(doc_id), doc_id)
    return (1, 0, doc_id)


def search(
    documents: Iterable[Document],
    request: SearchRequest,
    order: SearchOrder | str = SearchOrder.INSERTION,
) -> list[Document]:
    """Return the documents matching the request.

    Args:
        documents: Snapshot of stored documents, in insertion order.
        request: The composite filter.
        order: ``insertion`` keeps the snapshot order, ``id`` sorts by id.
    """
    order = SearchOrder(order)
    results = [doc for doc in documents if matches(request, doc)]
    if order is SearchOrder.ID:
        results.sort(key=_id_sort_key)
    logger.debug(
        "Search %s matched %d document(s)",
        request.model_dump(exclude_none=True),
        len(results),
    )
    return results
