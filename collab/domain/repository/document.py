"""Document repository interface."""

from abc import ABC, abstractmethod

from collab.domain.model import Document
from collab.domain.value import DocumentId


class DocumentRepository(ABC):
    """Repository for Document entity."""

    @abstractmethod
    async def find_by_id(self, document_id: DocumentId) -> Document | None:
        """Find a document by ID."""
        pass

    @abstractmethod
    async def save(self, document: Document) -> Document:
        """Save a document (create or update)."""
        pass
