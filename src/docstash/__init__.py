"""docstash - In-memory document repository with multi-criterion search."""
from docstash.exceptions import DuplicateDocumentError
from docstash.models import Author, Document, SearchRequest
from docstash.services import DocumentService
from docstash.storage import DocumentStore

__version__ = "0.1.0"

__all__ = [
    "Author",
    "Document",
    "DocumentService",
    "DocumentStore",
    "DuplicateDocumentError",
    "SearchRequest",
]
