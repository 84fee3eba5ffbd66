"""Create version use case."""

import logfire
from pydantic import BaseModel, Field

from collab.application.usecase.base import BaseUseCase, parse_id
from collab.application.usecase.version.items import VersionDetail
from collab.domain.error import ValidationError
from collab.domain.service import DocumentService, VersionService
from collab.domain.value import AccountId, DocumentId, VersionType


class CreateVersionRequest(BaseModel):
    """Request to save a snapshot of a document."""

    document_id: str
    creator_id: str  # Account ID from auth
    title: str = Field(max_length=500)
    content: str
    description: str | None = Field(default=None, max_length=1000)
    version_type: VersionType = VersionType.MANUAL


class CreateVersionResponse(BaseModel):
    """Response after saving a version."""

    version: VersionDetail


class CreateVersionUseCase(BaseUseCase):
    """Use case for appending a version to a document's history."""

    def __init__(
        self, document_service: DocumentService, version_service: VersionService
    ) -> None:
        self.document_service = document_service
        self.version_service = version_service

    async def execute(self, request: CreateVersionRequest) -> CreateVersionResponse:
        """Execute create version use case.

        Raises:
            ValidationError: If input is invalid or the creator may not edit
            NotFoundError: If the document is not visible to the creator
            VersionConflictError: If concurrent saves exhausted the retries
        """
        document_id = DocumentId(parse_id(request.document_id, "document_id"))
        creator_id = AccountId(parse_id(request.creator_id, "creator_id"))

        if not request.title.strip():
            raise ValidationError("Version title is required")
        if request.version_type is VersionType.RESTORE:
            raise ValidationError("Restore versions are created by restoring")

        with logfire.span(
            "create_version",
            document_id=str(document_id),
            version_type=request.version_type.value,
        ):
            await self.document_service.get_for_editor(document_id, creator_id)
            version = await self.version_service.create_version(
                document_id,
                creator_id,
                title=request.title,
                content=request.content,
                description=request.description,
                version_type=request.version_type,
            )
            return CreateVersionResponse(version=VersionDetail.from_version(version))
