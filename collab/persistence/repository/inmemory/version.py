"""In-memory version repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from collab.domain.model import DocumentVersion
from collab.domain.repository import VersionRepository
from collab.domain.value import DocumentId, VersionId


class InMemoryVersionRepository(VersionRepository):
    """In-memory implementation of VersionRepository for testing."""

    def __init__(self) -> None:
        self._versions: list[DocumentVersion] = []

    def _for_document(self, document_id: DocumentId) -> list[DocumentVersion]:
        return [v for v in self._versions if v.document_id == document_id]

    async def find_by_id(self, version_id: VersionId) -> Optional[DocumentVersion]:
        for version in self._versions:
            if version.id == version_id:
                return version
        return None

    async def find_latest(self, document_id: DocumentId) -> Optional[DocumentVersion]:
        versions = self._for_document(document_id)
        return max(versions, key=lambda v: v.version_number) if versions else None

    async def max_version_number(self, document_id: DocumentId) -> int:
        return max((v.version_number for v in self._for_document(document_id)), default=0)

    async def find_by_document(self, document_id: DocumentId) -> list[DocumentVersion]:
        return sorted(
            self._for_document(document_id),
            key=lambda v: v.version_number,
            reverse=True,
        )

    async def add(self, version: DocumentVersion) -> DocumentVersion:
        """Append a version.

        Raises:
            IntegrityError: If the version number is already taken
        """
        for existing in self._for_document(version.document_id):
            if existing.version_number == version.version_number:
                raise IntegrityError("Duplicate version number", None, Exception())
        self._versions.append(version)
        return version
