"""In-memory document repository for testing."""

from typing import Optional

from collab.domain.model import Document
from collab.domain.repository import DocumentRepository
from collab.domain.value import DocumentId


class InMemoryDocumentRepository(DocumentRepository):
    """In-memory implementation of DocumentRepository for testing."""

    def __init__(self) -> None:
        self._documents: dict[DocumentId, Document] = {}

    async def find_by_id(self, document_id: DocumentId) -> Optional[Document]:
        return self._documents.get(document_id)

    async def save(self, document: Document) -> Document:
        self._documents[document.id] = document
        return document
