"""Service factory for dependency injection."""
from __future__ import annotations

from docstash.config import DocstashConfig, get_config
from docstash.services.document_service import DocumentService
from docstash.storage import DocumentStore, make_id_generator
from docstash.storage.document_store import Clock


class ServiceFactory:
    """Factory for creating service instances with dependency injection."""

    def __init__(self, config: DocstashConfig | None = None):
        """Initialize the service factory."""
        self._config = config or get_config()

    @property
    def config(self) -> DocstashConfig:
        return self._config

    def create_document_store(self, clock: Clock | None = None) -> DocumentStore:
        """Create a DocumentStore instance.

        Args:
            clock: Optional source of creation timestamps. Defaults to UTC now.

        Returns:
            An empty DocumentStore using the configured id strategy.
        """
        return DocumentStore(
            id_generator=make_id_generator(self._config.id_strategy),
            clock=clock,
        )

    def create_document_service(self, store: DocumentStore | None = None) -> DocumentService:
        """Create a DocumentService instance.

        Returns:
            A DocumentService over the given store, or over a fresh one.
        """
        return DocumentService(
            store=store if store is not None else self.create_document_store(),
            config=self._config,
        )


def get_service_factory(config: DocstashConfig | None = None) -> ServiceFactory:
    """Create a ServiceFactory instance.

    Returns:
        A ServiceFactory instance.
    """
    return ServiceFactory(config=config)
