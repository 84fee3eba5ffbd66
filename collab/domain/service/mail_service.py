"""Invitation mail hand-off domain service."""

import logfire

from collab.domain.model import Document, Invitation
from collab.domain.value import CollaboratorRole, DocumentKind
from collab.domain.value.common import ValueObject

from .base import Service


class CollaborationInviteMail(ValueObject):
    """Data handed to the mail relay for a collaboration invitation."""

    invitee_email: str
    invitee_name: str
    inviter_name: str
    document_title: str
    role: CollaboratorRole
    message: str | None = None
    invitation_token: str
    kind: DocumentKind


class MailResult(ValueObject):
    """Delivery hand-off result."""

    success: bool
    error: str | None = None


class MailClient:
    """Mail relay client interface."""

    async def send_collaboration_invite(self, mail: CollaborationInviteMail) -> MailResult:
        """Hand an invitation mail to the relay.

        Args:
            mail: Invitation data

        Returns:
            Hand-off result; transport failures are reported here, not raised
        """
        raise NotImplementedError


class MailService(Service):
    """Domain service building and dispatching invitation mail."""

    def __init__(self, mail_client: MailClient) -> None:
        """Initialize mail service.

        Args:
            mail_client: Mail relay client
        """
        self.mail_client = mail_client

    async def send_invitation(
        self, invitation: Invitation, document: Document, inviter_name: str
    ) -> MailResult:
        """Send the invitation mail for an invitation with a known email.

        Args:
            invitation: Persisted invitation
            document: Document the invitation is for
            inviter_name: Display name of the inviter

        Returns:
            Hand-off result
        """
        if not invitation.email:
            return MailResult(success=False, error="Invitation has no email address")

        with logfire.span(
            "mail_service.send_invitation", invitation_id=str(invitation.id)
        ):
            mail = CollaborationInviteMail(
                invitee_email=invitation.email,
                invitee_name=invitation.invitee_name,
                inviter_name=inviter_name,
                document_title=document.title,
                role=invitation.role,
                message=invitation.message,
                invitation_token=invitation.token.root,
                kind=document.kind,
            )
            result = await self.mail_client.send_collaboration_invite(mail)
            if result.success:
                logfire.info(
                    "Invitation mail handed off", invitation_id=str(invitation.id)
                )
            else:
                logfire.warn(
                    "Invitation mail failed",
                    invitation_id=str(invitation.id),
                    error=result.error,
                )
            return result
