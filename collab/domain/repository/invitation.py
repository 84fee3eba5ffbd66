"""Invitation repository interface."""

from abc import ABC, abstractmethod

from collab.domain.model import Invitation
from collab.domain.value import (
    AccountId,
    DocumentId,
    InvitationId,
    InvitationStatus,
)


class InvitationRepository(ABC):
    """Repository for Invitation entity.

    Implementations must refuse a second PENDING invitation for the same
    (document, identity) at the storage level, so that the duplicate check
    holds under concurrent requests.
    """

    @abstractmethod
    async def find_by_id(self, invitation_id: InvitationId) -> Invitation | None:
        """Find an invitation by ID."""
        pass

    @abstractmethod
    async def find_pending_matching(
        self,
        document_id: DocumentId,
        account_id: AccountId | None,
        orcid_id: str | None,
        email: str | None,
    ) -> list[Invitation]:
        """Find PENDING invitations on a document matching any identity key.

        Null keys are ignored. Email matches case-insensitively.

        Args:
            document_id: The document
            account_id: Resolved invitee account, if any
            orcid_id: Invitee ORCID iD, if any
            email: Invitee email, if any

        Returns:
            Matching pending invitations (possibly already past expiry)
        """
        pass

    @abstractmethod
    async def find_by_document(
        self,
        document_id: DocumentId,
        status: InvitationStatus | None = None,
    ) -> list[Invitation]:
        """List invitations on a document, newest first.

        Args:
            document_id: The document
            status: Optional stored-status filter
        """
        pass

    @abstractmethod
    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update).

        Raises:
            IntegrityError: If a pending invitation already exists for the
                same document and identity
        """
        pass
