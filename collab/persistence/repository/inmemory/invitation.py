"""In-memory invitation repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from collab.domain.model import Invitation
from collab.domain.repository import InvitationRepository
from collab.domain.value import (
    AccountId,
    DocumentId,
    InvitationId,
    InvitationStatus,
)


class InMemoryInvitationRepository(InvitationRepository):
    """In-memory implementation of InvitationRepository for testing.

    Mirrors the partial unique indexes: one PENDING invitation per
    (document, account), (document, ORCID) and (document, email).
    """

    def __init__(self) -> None:
        self._invitations: list[Invitation] = []

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        for invitation in self._invitations:
            if invitation.id == invitation_id:
                return invitation
        return None

    async def find_pending_matching(
        self,
        document_id: DocumentId,
        account_id: AccountId | None,
        orcid_id: str | None,
        email: str | None,
    ) -> list[Invitation]:
        return [
            i
            for i in self._invitations
            if i.document_id == document_id
            and i.status == InvitationStatus.PENDING
            and i.matches_identity(account_id, orcid_id, email)
        ]

    async def find_by_document(
        self,
        document_id: DocumentId,
        status: InvitationStatus | None = None,
    ) -> list[Invitation]:
        invitations = [
            i
            for i in self._invitations
            if i.document_id == document_id and (status is None or i.status == status)
        ]
        return sorted(invitations, key=lambda i: i.created_at, reverse=True)

    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update).

        Raises:
            IntegrityError: If a pending invitation already exists for the
                same document and identity
        """
        if invitation.status == InvitationStatus.PENDING:
            clashes = [
                i
                for i in await self.find_pending_matching(
                    invitation.document_id,
                    invitation.invited_account_id,
                    invitation.orcid_id,
                    invitation.email,
                )
                if i.id != invitation.id
            ]
            if clashes:
                raise IntegrityError("Duplicate pending invitation", None, Exception())

        for i, existing in enumerate(self._invitations):
            if existing.id == invitation.id:
                self._invitations[i] = invitation
                return invitation

        self._invitations.append(invitation)
        return invitation
