"""List collaborators use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from collab.application.usecase.base import BaseUseCase, parse_id
from collab.application.usecase.invitation.items import InvitationItem
from collab.domain.model import utc_now
from collab.domain.service import DocumentService, IdentityService, InvitationService
from collab.domain.value import AccountId, CollaboratorRole, DocumentId


class CollaboratorItem(BaseModel):
    """Collaborator item in response."""

    account_id: str
    name: str
    email: str | None
    orcid_id: str | None
    affiliation: str | None
    role: CollaboratorRole
    can_edit: bool
    can_invite: bool
    can_delete: bool
    is_creator: bool
    joined_at: datetime


class ListCollaboratorsRequest(BaseModel):
    """List collaborators request."""

    document_id: str
    requester_id: str  # Account ID from auth


class ListCollaboratorsResponse(BaseModel):
    """Document roster: active collaborators and live pending invitations."""

    collaborators: list[CollaboratorItem]
    pending_invitations: list[InvitationItem]


class ListCollaboratorsUseCase(BaseUseCase):
    """Use case for viewing who works on a document."""

    def __init__(
        self,
        document_service: DocumentService,
        identity_service: IdentityService,
        invitation_service: InvitationService,
    ) -> None:
        """Initialize use case.

        Args:
            document_service: Document access domain service
            identity_service: Identity domain service, used to name collaborators
            invitation_service: Invitation ledger domain service
        """
        self.document_service = document_service
        self.identity_service = identity_service
        self.invitation_service = invitation_service

    async def execute(
        self, request: ListCollaboratorsRequest
    ) -> ListCollaboratorsResponse:
        """Execute list collaborators use case.

        Raises:
            ValidationError: If the document is missing or the requester is not a member
        """
        document_id = DocumentId(parse_id(request.document_id, "document_id"))
        requester_id = AccountId(parse_id(request.requester_id, "requester_id"))

        with logfire.span("list_collaborators", document_id=str(document_id)):
            document = await self.document_service.get_for_member(
                document_id, requester_id
            )
            roster = await self.document_service.list_roster(document)

            items: list[CollaboratorItem] = []
            for collaborator in roster:
                account = await self.identity_service.get_account(
                    collaborator.account_id
                )
                items.append(
                    CollaboratorItem(
                        account_id=str(collaborator.account_id),
                        name=account.display_name if account else "Unknown researcher",
                        email=account.email if account else None,
                        orcid_id=account.orcid_id if account else None,
                        affiliation=account.primary_institution if account else None,
                        role=collaborator.role,
                        can_edit=collaborator.can_edit,
                        can_invite=collaborator.can_invite,
                        can_delete=collaborator.can_delete,
                        is_creator=collaborator.is_creator,
                        joined_at=collaborator.joined_at,
                    )
                )

            now = utc_now()
            pending = await self.invitation_service.list_pending(document_id, now)
            return ListCollaboratorsResponse(
                collaborators=items,
                pending_invitations=[InvitationItem.from_invitation(i, now) for i in pending],
            )
