"""Invitation ledger domain service."""

import secrets
from datetime import datetime, timedelta
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from collab.config import InvitationSettings
from collab.domain.error import AlreadyCollaboratorError, DuplicateError
from collab.domain.model import Invitation, utc_now
from collab.domain.repository import CollaboratorRepository, InvitationRepository
from collab.domain.value import (
    AccountId,
    CollaboratorRole,
    DocumentId,
    InvitationId,
    InvitationStatus,
    InvitationToken,
)

from .base import Service
from .identity_service import ResolvedInvitee


class InvitationService(Service):
    """Domain service for creating, deduplicating and listing invitations."""

    def __init__(
        self,
        invitation_repository: InvitationRepository,
        collaborator_repository: CollaboratorRepository,
        settings: InvitationSettings,
    ) -> None:
        """Initialize invitation service.

        Args:
            invitation_repository: Invitation repository
            collaborator_repository: Collaborator repository
            settings: Invitation settings (expiry, token size)
        """
        self.invitation_repository = invitation_repository
        self.collaborator_repository = collaborator_repository
        self.settings = settings

    def generate_token(self) -> InvitationToken:
        return InvitationToken(secrets.token_urlsafe(self.settings.token_bytes))

    async def create_invitation(
        self,
        document_id: DocumentId,
        inviter_id: AccountId,
        invitee: ResolvedInvitee,
        orcid_id: str | None,
        role: CollaboratorRole = CollaboratorRole.CONTRIBUTOR,
        message: str | None = None,
        now: datetime | None = None,
    ) -> Invitation:
        """Create a PENDING invitation for a resolved invitee.

        Args:
            document_id: Document the invitation is for
            inviter_id: Account sending the invitation
            invitee: Identity resolution result
            orcid_id: ORCID iD supplied by the caller
            role: Role offered
            message: Optional personal message
            now: Creation time (defaults to the current time)

        Returns:
            Created invitation

        Raises:
            AlreadyCollaboratorError: If the resolved account already collaborates
            DuplicateError: If a pending invitation exists for the identity
        """
        now = now or utc_now()

        with logfire.span(
            "invitation_service.create_invitation",
            document_id=str(document_id),
            inviter_id=str(inviter_id),
            matched=invitee.matched,
        ):
            if invitee.account_id:
                existing = await self.collaborator_repository.find(
                    document_id, invitee.account_id
                )
                if existing:
                    logfire.warn(
                        "Invitee is already a collaborator",
                        document_id=str(document_id),
                        account_id=str(invitee.account_id),
                    )
                    raise AlreadyCollaboratorError(
                        str(document_id), str(invitee.account_id)
                    )

            identity = self._describe_identity(invitee, orcid_id)
            await self._ensure_no_pending(document_id, invitee, orcid_id, identity, now)

            invitation = Invitation(
                id=InvitationId(uuid4()),
                document_id=document_id,
                inviter_id=inviter_id,
                invited_account_id=invitee.account_id,
                orcid_id=orcid_id,
                email=invitee.email,
                given_name=invitee.given_name,
                family_name=invitee.family_name,
                affiliation=invitee.affiliation,
                role=role,
                status=InvitationStatus.PENDING,
                message=message,
                token=self.generate_token(),
                created_at=now,
                expires_at=now + timedelta(days=self.settings.expiry_days),
            )

            try:
                saved = await self.invitation_repository.save(invitation)
            except IntegrityError:
                # Lost a race with a concurrent request for the same identity
                logfire.warn(
                    "Duplicate pending invitation rejected by storage",
                    document_id=str(document_id),
                    identity=identity,
                )
                raise DuplicateError(str(document_id), identity)

            logfire.info(
                "Invitation created",
                invitation_id=str(saved.id),
                document_id=str(document_id),
                inviter_id=str(inviter_id),
                invited_account_id=str(invitee.account_id) if invitee.account_id else None,
            )
            return saved

    async def _ensure_no_pending(
        self,
        document_id: DocumentId,
        invitee: ResolvedInvitee,
        orcid_id: str | None,
        identity: str,
        now: datetime,
    ) -> None:
        """Raise DuplicateError if a live pending invitation exists.

        Lapsed pending invitations are marked EXPIRED on the way.
        """
        pending = await self.invitation_repository.find_pending_matching(
            document_id, invitee.account_id, orcid_id, invitee.email
        )
        for invitation in pending:
            if invitation.is_expired(now):
                await self.invitation_repository.save(
                    invitation.model_copy(update={"status": InvitationStatus.EXPIRED})
                )
                logfire.info(
                    "Lapsed pending invitation marked expired",
                    invitation_id=str(invitation.id),
                )
                continue

            logfire.warn(
                "Pending invitation already exists",
                document_id=str(document_id),
                invitation_id=str(invitation.id),
            )
            raise DuplicateError(str(document_id), identity)

    async def list_invitations(self, document_id: DocumentId) -> list[Invitation]:
        """List all invitations on a document, newest first."""
        with logfire.span(
            "invitation_service.list_invitations", document_id=str(document_id)
        ):
            invitations = await self.invitation_repository.find_by_document(document_id)
            logfire.info(
                "Invitations listed",
                document_id=str(document_id),
                count=len(invitations),
            )
            return invitations

    async def list_pending(
        self, document_id: DocumentId, now: datetime | None = None
    ) -> list[Invitation]:
        """List pending invitations that have not lapsed, newest first."""
        now = now or utc_now()
        invitations = await self.invitation_repository.find_by_document(
            document_id, InvitationStatus.PENDING
        )
        return [i for i in invitations if not i.is_expired(now)]

    @staticmethod
    def _describe_identity(invitee: ResolvedInvitee, orcid_id: str | None) -> str:
        if invitee.account_id:
            return f"account {invitee.account_id}"
        if orcid_id:
            return f"ORCID {orcid_id}"
        return invitee.email or "unknown invitee"
