"""Storage module for docstash."""
from docstash.storage.document_store import DocumentStore, make_id_generator

__all__ = ["DocumentStore", "make_id_generator"]
