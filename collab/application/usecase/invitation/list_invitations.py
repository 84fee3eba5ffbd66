"""List invitations use case."""

import logfire
from pydantic import BaseModel

from collab.application.usecase.base import BaseUseCase, parse_id
from collab.application.usecase.invitation.items import InvitationItem
from collab.domain.model import utc_now
from collab.domain.service import DocumentService, InvitationService
from collab.domain.value import AccountId, DocumentId


class ListInvitationsRequest(BaseModel):
    """List invitations request."""

    document_id: str
    requester_id: str  # Account ID from auth


class ListInvitationsResponse(BaseModel):
    """List invitations response, newest first."""

    invitations: list[InvitationItem]
    total: int


class ListInvitationsUseCase(BaseUseCase):
    """Use case for listing a document's invitations.

    Visible to the creator and every collaborator.
    """

    def __init__(
        self,
        document_service: DocumentService,
        invitation_service: InvitationService,
    ) -> None:
        self.document_service = document_service
        self.invitation_service = invitation_service

    async def execute(self, request: ListInvitationsRequest) -> ListInvitationsResponse:
        """Execute list invitations use case.

        Raises:
            ValidationError: If the document is missing or the requester is not a member
        """
        document_id = DocumentId(parse_id(request.document_id, "document_id"))
        requester_id = AccountId(parse_id(request.requester_id, "requester_id"))

        with logfire.span("list_invitations", document_id=str(document_id)):
            await self.document_service.get_for_member(document_id, requester_id)
            invitations = await self.invitation_service.list_invitations(document_id)

            now = utc_now()
            items = [InvitationItem.from_invitation(i, now) for i in invitations]
            return ListInvitationsResponse(invitations=items, total=len(items))
