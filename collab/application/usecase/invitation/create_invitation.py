"""Create invitation use case."""

import re

import logfire
from pydantic import BaseModel, Field

from collab.application.usecase.base import BaseUseCase, parse_id
from collab.application.usecase.invitation.items import InvitationItem
from collab.domain.error import AlreadyCollaboratorError, ValidationError
from collab.domain.model import Document, Invitation, utc_now
from collab.domain.repository import UnitOfWork
from collab.domain.service import (
    DocumentService,
    IdentityService,
    InvitationService,
    MailService,
    NotificationService,
    ResolvedInvitee,
)
from collab.domain.value import (
    AccountId,
    CollaboratorRole,
    DocumentId,
    InvitationOutcome,
)

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_ORCID_RE = re.compile(r"^\d{4}-\d{4}-\d{4}-\d{3}[\dX]$")
_ORCID_URL_PREFIX = re.compile(r"^https?://(www\.)?orcid\.org/", re.IGNORECASE)


class CreateInvitationRequest(BaseModel):
    """Request to invite a researcher to a document."""

    document_id: str
    inviter_id: str  # Account ID from auth
    orcid_id: str | None = Field(default=None, max_length=64)
    email: str | None = Field(default=None, max_length=255)
    given_name: str | None = Field(default=None, max_length=255)
    family_name: str | None = Field(default=None, max_length=255)
    affiliation: str | None = Field(default=None, max_length=500)
    role: CollaboratorRole = CollaboratorRole.CONTRIBUTOR
    message: str | None = Field(default=None, max_length=2000)


class CreateInvitationResponse(BaseModel):
    """Response after creating an invitation."""

    invitation: InvitationItem
    outcome: InvitationOutcome
    message: str  # Caller-facing summary
    notification_sent: bool
    mail_sent: bool
    warnings: list[str]


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _normalize_orcid(value: str | None) -> str | None:
    """Accept the bare iD or its https://orcid.org/ form."""
    value = _clean(value)
    if value is None:
        return None
    value = _ORCID_URL_PREFIX.sub("", value).rstrip("/").upper()
    return value or None


class CreateInvitationUseCase(BaseUseCase):
    """Use case for inviting a researcher to collaborate on a document.

    The invitation is committed before notification and mail run. Either
    side effect may fail; failures come back as warnings on the response.
    """

    def __init__(
        self,
        document_service: DocumentService,
        identity_service: IdentityService,
        invitation_service: InvitationService,
        notification_service: NotificationService,
        mail_service: MailService,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize use case.

        Args:
            document_service: Document access domain service
            identity_service: Identity resolution domain service
            invitation_service: Invitation ledger domain service
            notification_service: Notification domain service
            mail_service: Mail hand-off domain service
            unit_of_work: Request transaction boundary
        """
        self.document_service = document_service
        self.identity_service = identity_service
        self.invitation_service = invitation_service
        self.notification_service = notification_service
        self.mail_service = mail_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: CreateInvitationRequest) -> CreateInvitationResponse:
        """Execute create invitation use case.

        Args:
            request: Create invitation request

        Returns:
            Created invitation, outcome and any side-effect warnings

        Raises:
            ValidationError: If input is invalid or the inviter lacks permission
            LookupFailedError: If identity lookups fail
            AlreadyCollaboratorError: If the invitee already collaborates
            DuplicateError: If a pending invitation exists for the invitee
        """
        document_id = DocumentId(parse_id(request.document_id, "document_id"))
        inviter_id = AccountId(parse_id(request.inviter_id, "inviter_id"))
        orcid_id = _normalize_orcid(request.orcid_id)
        email = _clean(request.email)

        if not orcid_id and not email:
            raise ValidationError("Either an ORCID iD or an email address is required")
        if email and not _EMAIL_RE.match(email):
            raise ValidationError("Email address is not valid")
        if orcid_id and not _ORCID_RE.match(orcid_id):
            raise ValidationError("ORCID iD is not valid")

        with logfire.span(
            "create_invitation",
            document_id=str(document_id),
            inviter_id=str(inviter_id),
            by_orcid=bool(orcid_id),
            by_email=bool(email),
        ):
            document = await self.document_service.get_for_invite(document_id, inviter_id)

            inviter = await self.identity_service.get_account(inviter_id)
            inviter_name = inviter.display_name if inviter else "A colleague"

            invitee = await self.identity_service.resolve_invitee(
                orcid_id=orcid_id,
                email=email,
                given_name=_clean(request.given_name),
                family_name=_clean(request.family_name),
                affiliation=_clean(request.affiliation),
            )

            # The creator is an implicit OWNER without a collaborator row
            if invitee.account_id == document.creator_id:
                logfire.warn(
                    "Invitee is the document creator",
                    document_id=str(document_id),
                    account_id=str(invitee.account_id),
                )
                raise AlreadyCollaboratorError(
                    str(document_id), str(invitee.account_id)
                )

            now = utc_now()
            invitation = await self.invitation_service.create_invitation(
                document_id=document_id,
                inviter_id=inviter_id,
                invitee=invitee,
                orcid_id=orcid_id,
                role=request.role,
                message=_clean(request.message),
                now=now,
            )

            # The invitation is durable from here on
            await self.unit_of_work.commit()

            warnings: list[str] = []
            notification_sent = await self._notify(
                invitation, invitee, document, inviter_name, warnings
            )
            mail_sent = await self._send_mail(invitation, document, inviter_name, warnings)

            outcome = self._outcome(invitation, invitee)
            return CreateInvitationResponse(
                invitation=InvitationItem.from_invitation(invitation, now),
                outcome=outcome,
                message=self._message(outcome, invitation),
                notification_sent=notification_sent,
                mail_sent=mail_sent,
                warnings=warnings,
            )

    async def _notify(
        self,
        invitation: Invitation,
        invitee: ResolvedInvitee,
        document: Document,
        inviter_name: str,
        warnings: list[str],
    ) -> bool:
        """Post-commit step: in-app notification for existing accounts."""
        if not invitee.account_id:
            return False

        try:
            await self.notification_service.emit_collaboration_invite(
                account_id=invitee.account_id,
                document_id=document.id,
                invitation_id=invitation.id,
                inviter_name=inviter_name,
                document_title=document.title,
                role=invitation.role,
                document_kind=document.kind,
            )
        except Exception as e:
            logfire.error(
                "Failed to create invitation notification",
                invitation_id=str(invitation.id),
                error=str(e),
            )
            warnings.append("The invitee could not be notified in the app")
            return False
        return True

    async def _send_mail(
        self,
        invitation: Invitation,
        document: Document,
        inviter_name: str,
        warnings: list[str],
    ) -> bool:
        """Post-commit step: hand the invitation to the mail relay."""
        if not invitation.email:
            return False

        try:
            result = await self.mail_service.send_invitation(
                invitation, document, inviter_name
            )
        except Exception as e:
            logfire.error(
                "Unexpected error sending invitation mail",
                invitation_id=str(invitation.id),
                error=str(e),
            )
            warnings.append("The invitation email could not be sent")
            return False

        if not result.success:
            warnings.append(
                f"The invitation email could not be sent: {result.error or 'unknown error'}"
            )
        return result.success

    @staticmethod
    def _outcome(invitation: Invitation, invitee: ResolvedInvitee) -> InvitationOutcome:
        if invitee.matched:
            return InvitationOutcome.RESOLVED_EXISTING_USER
        if invitation.email:
            return InvitationOutcome.UNRESOLVED_WITH_EMAIL
        return InvitationOutcome.UNRESOLVED_WITHOUT_EMAIL

    @staticmethod
    def _message(outcome: InvitationOutcome, invitation: Invitation) -> str:
        if outcome is InvitationOutcome.RESOLVED_EXISTING_USER:
            return (
                f"Invitation sent! {invitation.invitee_name} will receive a "
                "notification when they log in."
            )
        if outcome is InvitationOutcome.UNRESOLVED_WITH_EMAIL:
            return (
                f"Invitation sent to {invitation.email}. They will need to create "
                "an account to accept."
            )
        return (
            "Invitation created. The researcher will need to claim it when they join."
        )
