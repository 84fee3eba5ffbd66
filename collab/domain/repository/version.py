"""Document version repository interface."""

from abc import ABC, abstractmethod

from collab.domain.model import DocumentVersion
from collab.domain.value import DocumentId, VersionId


class VersionRepository(ABC):
    """Append-only store of document versions.

    Versions are never updated or deleted.
    """

    @abstractmethod
    async def find_by_id(self, version_id: VersionId) -> DocumentVersion | None:
        """Find a version by ID."""
        pass

    @abstractmethod
    async def find_latest(self, document_id: DocumentId) -> DocumentVersion | None:
        """Find the current (highest-numbered) version of a document."""
        pass

    @abstractmethod
    async def max_version_number(self, document_id: DocumentId) -> int:
        """Highest version number for a document, 0 when it has none."""
        pass

    @abstractmethod
    async def find_by_document(self, document_id: DocumentId) -> list[DocumentVersion]:
        """List versions of a document, highest number first."""
        pass

    @abstractmethod
    async def add(self, version: DocumentVersion) -> DocumentVersion:
        """Append a version.

        Raises:
            IntegrityError: If the version number is already taken for the
                document. The surrounding transaction stays usable.
        """
        pass
