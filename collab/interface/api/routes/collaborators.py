"""Collaborator routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from collab.application.usecase.collaborator import (
    ListCollaboratorsRequest,
    ListCollaboratorsResponse,
    ListCollaboratorsUseCase,
)
from collab.domain.error import DomainError
from collab.domain.service import JWTService
from collab.interface.api.errors import authenticate, to_http_error

router = APIRouter(
    prefix="/documents/{document_id}/collaborators",
    tags=["collaborators"],
    route_class=DishkaRoute,
)


@router.get("", response_model=ListCollaboratorsResponse)
async def list_collaborators(
    document_id: UUID,
    list_collaborators_use_case: FromDishka[ListCollaboratorsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListCollaboratorsResponse:
    """List a document's collaborators and pending invitations."""
    requester_id = authenticate(jwt_service, auth_token)

    try:
        return await list_collaborators_use_case.execute(
            ListCollaboratorsRequest(
                document_id=str(document_id), requester_id=requester_id
            )
        )
    except DomainError as e:
        raise to_http_error(e)
