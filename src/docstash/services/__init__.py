"""Service layer for docstash."""
from docstash.services.document_service import DocumentService
from docstash.services.factory import ServiceFactory, get_service_factory

__all__ = ["DocumentService", "ServiceFactory", "get_service_factory"]
