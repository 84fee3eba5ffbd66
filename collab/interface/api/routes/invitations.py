"""Invitation routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from collab.application.usecase.invitation import (
    CreateInvitationRequest,
    CreateInvitationResponse,
    CreateInvitationUseCase,
    ListInvitationsRequest,
    ListInvitationsResponse,
    ListInvitationsUseCase,
)
from collab.domain.error import DomainError
from collab.domain.service import JWTService
from collab.domain.value import CollaboratorRole
from collab.interface.api.errors import authenticate, to_http_error

router = APIRouter(
    prefix="/documents/{document_id}/invitations",
    tags=["invitations"],
    route_class=DishkaRoute,
)


class CreateInvitationAPIRequest(BaseModel):
    """API request for inviting a researcher."""

    orcid_id: str | None = Field(default=None, max_length=64)
    email: str | None = Field(default=None, max_length=255)
    given_name: str | None = Field(default=None, max_length=255)
    family_name: str | None = Field(default=None, max_length=255)
    affiliation: str | None = Field(default=None, max_length=500)
    role: CollaboratorRole = CollaboratorRole.CONTRIBUTOR
    message: str | None = Field(default=None, max_length=2000)


@router.post(
    "", response_model=CreateInvitationResponse, status_code=status.HTTP_201_CREATED
)
async def create_invitation(
    document_id: UUID,
    request: CreateInvitationAPIRequest,
    create_invitation_use_case: FromDishka[CreateInvitationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateInvitationResponse:
    """Invite a researcher to collaborate on a document.

    Raises:
        HTTPException: 401 unauthenticated, 400 invalid or not permitted,
            409 already invited or already a collaborator, 503 lookup unavailable
    """
    inviter_id = authenticate(jwt_service, auth_token)

    try:
        return await create_invitation_use_case.execute(
            CreateInvitationRequest(
                document_id=str(document_id),
                inviter_id=inviter_id,
                **request.model_dump(),
            )
        )
    except DomainError as e:
        logfire.warn("Invitation creation failed", error=str(e))
        raise to_http_error(e)


@router.get("", response_model=ListInvitationsResponse)
async def list_invitations(
    document_id: UUID,
    list_invitations_use_case: FromDishka[ListInvitationsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListInvitationsResponse:
    """List a document's invitations, newest first."""
    requester_id = authenticate(jwt_service, auth_token)

    try:
        return await list_invitations_use_case.execute(
            ListInvitationsRequest(
                document_id=str(document_id), requester_id=requester_id
            )
        )
    except DomainError as e:
        raise to_http_error(e)
