"""Custom exceptions for docstash."""


class DocstashError(Exception):
    """Base exception for docstash."""
    pass


class DuplicateDocumentError(DocstashError):
    """Raised when saving a document whose id is already stored."""

    def __init__(self, document_id: str):
        self.document_id = document_id
        super().__init__(f"Document already exists: {document_id}")


class ConfigError(DocstashError):
    """Configuration errors."""
    pass


class DocumentLoadError(DocstashError):
    """Errors reading documents from an input file."""
    pass
