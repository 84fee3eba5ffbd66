"""Document version routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from collab.application.usecase.version import (
    CreateVersionRequest,
    CreateVersionResponse,
    CreateVersionUseCase,
    GetVersionRequest,
    GetVersionResponse,
    GetVersionUseCase,
    ListVersionsRequest,
    ListVersionsResponse,
    ListVersionsUseCase,
    RestoreVersionRequest,
    RestoreVersionResponse,
    RestoreVersionUseCase,
)
from collab.domain.error import DomainError
from collab.domain.service import JWTService
from collab.domain.value import VersionType
from collab.interface.api.errors import authenticate, to_http_error

router = APIRouter(
    prefix="/documents/{document_id}/versions",
    tags=["versions"],
    route_class=DishkaRoute,
)


class CreateVersionAPIRequest(BaseModel):
    """API request for saving a version."""

    title: str = Field(min_length=1, max_length=500)
    content: str
    description: str | None = Field(default=None, max_length=1000)
    version_type: VersionType = VersionType.MANUAL


@router.post(
    "", response_model=CreateVersionResponse, status_code=status.HTTP_201_CREATED
)
async def create_version(
    document_id: UUID,
    request: CreateVersionAPIRequest,
    create_version_use_case: FromDishka[CreateVersionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateVersionResponse:
    """Save a snapshot of the document as the next version."""
    creator_id = authenticate(jwt_service, auth_token)

    try:
        return await create_version_use_case.execute(
            CreateVersionRequest(
                document_id=str(document_id),
                creator_id=creator_id,
                **request.model_dump(),
            )
        )
    except DomainError as e:
        logfire.warn("Version creation failed", error=str(e))
        raise to_http_error(e)


@router.get("", response_model=ListVersionsResponse)
async def list_versions(
    document_id: UUID,
    list_versions_use_case: FromDishka[ListVersionsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListVersionsResponse:
    """List the document's versions, current first."""
    requester_id = authenticate(jwt_service, auth_token)

    try:
        return await list_versions_use_case.execute(
            ListVersionsRequest(document_id=str(document_id), requester_id=requester_id)
        )
    except DomainError as e:
        raise to_http_error(e)


@router.get("/{version_id}", response_model=GetVersionResponse)
async def get_version(
    document_id: UUID,
    version_id: UUID,
    get_version_use_case: FromDishka[GetVersionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetVersionResponse:
    """Get one version with its content."""
    requester_id = authenticate(jwt_service, auth_token)

    try:
        return await get_version_use_case.execute(
            GetVersionRequest(
                document_id=str(document_id),
                version_id=str(version_id),
                requester_id=requester_id,
            )
        )
    except DomainError as e:
        raise to_http_error(e)


@router.post("/{version_id}/restore", response_model=RestoreVersionResponse)
async def restore_version(
    document_id: UUID,
    version_id: UUID,
    restore_version_use_case: FromDishka[RestoreVersionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> RestoreVersionResponse:
    """Restore an earlier version as the new current version.

    Live changes that differ from the current version are saved as a backup
    version first.
    """
    account_id = authenticate(jwt_service, auth_token)

    try:
        return await restore_version_use_case.execute(
            RestoreVersionRequest(
                document_id=str(document_id),
                version_id=str(version_id),
                account_id=account_id,
            )
        )
    except DomainError as e:
        logfire.warn("Version restore failed", error=str(e))
        raise to_http_error(e)
