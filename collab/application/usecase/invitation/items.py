"""Invitation response items shared by invitation use cases."""

from datetime import datetime

from pydantic import BaseModel

from collab.domain.model import Invitation
from collab.domain.value import CollaboratorRole, InvitationStatus


class InvitationItem(BaseModel):
    """Invitation item in responses.

    ``status`` is the effective status: PENDING past expiry reads EXPIRED.
    """

    invitation_id: str
    document_id: str
    inviter_id: str
    invited_account_id: str | None
    orcid_id: str | None
    email: str | None
    given_name: str | None
    family_name: str | None
    affiliation: str | None
    role: CollaboratorRole
    status: InvitationStatus
    message: str | None
    created_at: datetime
    expires_at: datetime

    @classmethod
    def from_invitation(cls, invitation: Invitation, now: datetime) -> "InvitationItem":
        return cls(
            invitation_id=str(invitation.id),
            document_id=str(invitation.document_id),
            inviter_id=str(invitation.inviter_id),
            invited_account_id=(
                str(invitation.invited_account_id)
                if invitation.invited_account_id
                else None
            ),
            orcid_id=invitation.orcid_id,
            email=invitation.email,
            given_name=invitation.given_name,
            family_name=invitation.family_name,
            affiliation=invitation.affiliation,
            role=invitation.role,
            status=invitation.effective_status(now),
            message=invitation.message,
            created_at=invitation.created_at,
            expires_at=invitation.expires_at,
        )
