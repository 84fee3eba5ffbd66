"""Collaborator repository interface."""

from abc import ABC, abstractmethod

from collab.domain.model import Collaborator
from collab.domain.value import AccountId, DocumentId


class CollaboratorRepository(ABC):
    """Repository for Collaborator entity."""

    @abstractmethod
    async def find(
        self, document_id: DocumentId, account_id: AccountId
    ) -> Collaborator | None:
        """Find the membership of an account on a document.

        Args:
            document_id: The document
            account_id: The account

        Returns:
            The collaborator row if present, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_document(self, document_id: DocumentId) -> list[Collaborator]:
        """List collaborators of a document, earliest joined first."""
        pass

    @abstractmethod
    async def save(self, collaborator: Collaborator) -> Collaborator:
        """Save a collaborator.

        Raises:
            IntegrityError: If the account already collaborates on the document
        """
        pass
