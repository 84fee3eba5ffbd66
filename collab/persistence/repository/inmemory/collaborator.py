"""In-memory collaborator repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from collab.domain.model import Collaborator
from collab.domain.repository import CollaboratorRepository
from collab.domain.value import AccountId, DocumentId


class InMemoryCollaboratorRepository(CollaboratorRepository):
    """In-memory implementation of CollaboratorRepository for testing."""

    def __init__(self) -> None:
        self._collaborators: list[Collaborator] = []

    async def find(
        self, document_id: DocumentId, account_id: AccountId
    ) -> Optional[Collaborator]:
        for collaborator in self._collaborators:
            if (
                collaborator.document_id == document_id
                and collaborator.account_id == account_id
            ):
                return collaborator
        return None

    async def find_by_document(self, document_id: DocumentId) -> list[Collaborator]:
        members = [c for c in self._collaborators if c.document_id == document_id]
        return sorted(members, key=lambda c: c.joined_at)

    async def save(self, collaborator: Collaborator) -> Collaborator:
        """Save a collaborator.

        Raises:
            IntegrityError: If the account already collaborates on the document
        """
        for i, existing in enumerate(self._collaborators):
            if existing.id == collaborator.id:
                self._collaborators[i] = collaborator
                return collaborator

        if await self.find(collaborator.document_id, collaborator.account_id):
            raise IntegrityError("Duplicate collaborator", None, Exception())

        self._collaborators.append(collaborator)
        return collaborator
