"""Notification domain service."""

from uuid import uuid4

import logfire

from collab.domain.model import Notification
from collab.domain.repository import NotificationRepository
from collab.domain.value import (
    AccountId,
    CollaboratorRole,
    DocumentId,
    DocumentKind,
    InvitationId,
    NotificationId,
    NotificationType,
)

from .base import Service


class NotificationService(Service):
    """Domain service emitting in-app notifications."""

    def __init__(self, notification_repository: NotificationRepository) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
        """
        self.notification_repository = notification_repository

    async def emit_collaboration_invite(
        self,
        account_id: AccountId,
        document_id: DocumentId,
        invitation_id: InvitationId,
        inviter_name: str,
        document_title: str,
        role: CollaboratorRole,
        document_kind: DocumentKind,
    ) -> Notification:
        """Notify an existing account that it has been invited.

        Args:
            account_id: Invitee account
            document_id: Document the invitation is for
            invitation_id: The invitation
            inviter_name: Display name of the inviter
            document_title: Title of the document
            role: Role offered
            document_kind: Manuscript or proposal, drives the wording

        Returns:
            Saved notification
        """
        with logfire.span(
            "notification_service.emit_collaboration_invite",
            account_id=str(account_id),
            invitation_id=str(invitation_id),
        ):
            if document_kind is DocumentKind.PROPOSAL:
                title = "Research Proposal Invitation"
            else:
                title = "Manuscript Collaboration Invitation"

            notification = Notification(
                id=NotificationId(uuid4()),
                account_id=account_id,
                document_id=document_id,
                type=NotificationType.COLLABORATION_INVITATION,
                title=title,
                message=(
                    f"{inviter_name} has invited you to collaborate on the "
                    f'{document_kind.label} "{document_title}" as {role.value}'
                ),
                data={
                    "invitation_id": str(invitation_id),
                    "inviter_name": inviter_name,
                    "document_title": document_title,
                    "role": role.value,
                    "action": "pending",
                    "document_kind": document_kind.value,
                },
            )

            saved = await self.notification_repository.save(notification)
            logfire.info(
                "Collaboration invite notification created",
                notification_id=str(saved.id),
                account_id=str(account_id),
            )
            return saved
