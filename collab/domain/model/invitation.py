"""Invitation entity.

Invitations offer a collaboration role on a document to a researcher who is
identified by account, ORCID iD or email.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from collab.domain.model.common import DomainModel, utc_now
from collab.domain.value import (
    AccountId,
    CollaboratorRole,
    DocumentId,
    InvitationId,
    InvitationStatus,
    InvitationToken,
)


class Invitation(DomainModel):
    """Invitation entity.

    Business rules:
    - At most one PENDING invitation per (document, identity), where identity
      is the invited account, else the ORCID iD, else the email
    - Created PENDING; ACCEPTED/DECLINED are set by the invitee elsewhere
    - Stops being effective once ``expires_at`` passes. This is checked when
      read, there is no sweeper.
    """

    id: InvitationId
    document_id: DocumentId
    inviter_id: AccountId
    invited_account_id: Optional[AccountId] = None
    orcid_id: Optional[str] = None
    email: Optional[str] = None
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    affiliation: Optional[str] = None
    role: CollaboratorRole = CollaboratorRole.CONTRIBUTOR
    status: InvitationStatus = InvitationStatus.PENDING
    message: Optional[str] = None
    token: InvitationToken
    created_at: datetime = Field(default_factory=utc_now)
    expires_at: datetime
    responded_at: Optional[datetime] = None

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at

    def effective_status(self, now: datetime) -> InvitationStatus:
        """Status as read at ``now``: a lapsed PENDING invitation reads EXPIRED."""
        if self.status == InvitationStatus.PENDING and self.is_expired(now):
            return InvitationStatus.EXPIRED
        return self.status

    def matches_identity(
        self,
        account_id: AccountId | None,
        orcid_id: str | None,
        email: str | None,
    ) -> bool:
        """Whether this invitation targets any of the given identity keys."""
        if account_id and self.invited_account_id == account_id:
            return True
        if orcid_id and self.orcid_id == orcid_id:
            return True
        if email and self.email and self.email.lower() == email.lower():
            return True
        return False

    @property
    def invitee_name(self) -> str:
        name = f"{self.given_name or ''} {self.family_name or ''}".strip()
        return name or self.email or self.orcid_id or "Researcher"
