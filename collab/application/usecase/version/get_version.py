"""Get version use case."""

from pydantic import BaseModel

from collab.application.usecase.base import BaseUseCase, parse_id
from collab.application.usecase.version.items import VersionDetail
from collab.domain.service import DocumentService, VersionService
from collab.domain.value import AccountId, DocumentId, VersionId


class GetVersionRequest(BaseModel):
    """Get version request."""

    document_id: str
    version_id: str
    requester_id: str  # Account ID from auth


class GetVersionResponse(BaseModel):
    """Get version response."""

    version: VersionDetail


class GetVersionUseCase(BaseUseCase):
    """Use case for reading one version with its content."""

    def __init__(
        self, document_service: DocumentService, version_service: VersionService
    ) -> None:
        self.document_service = document_service
        self.version_service = version_service

    async def execute(self, request: GetVersionRequest) -> GetVersionResponse:
        """Execute get version use case.

        Raises:
            NotFoundError: If the document or version is missing or not visible
        """
        document_id = DocumentId(parse_id(request.document_id, "document_id"))
        version_id = VersionId(parse_id(request.version_id, "version_id"))
        requester_id = AccountId(parse_id(request.requester_id, "requester_id"))

        await self.document_service.get_for_reader(document_id, requester_id)
        version = await self.version_service.get_version(document_id, version_id)
        return GetVersionResponse(version=VersionDetail.from_version(version))
