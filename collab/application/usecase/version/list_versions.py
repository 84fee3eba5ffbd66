"""List versions use case."""

from pydantic import BaseModel

from collab.application.usecase.base import BaseUseCase, parse_id
from collab.application.usecase.version.items import VersionSummary
from collab.domain.service import DocumentService, VersionService
from collab.domain.value import AccountId, DocumentId


class ListVersionsRequest(BaseModel):
    """List versions request."""

    document_id: str
    requester_id: str  # Account ID from auth


class ListVersionsResponse(BaseModel):
    """Version history, current version first."""

    versions: list[VersionSummary]
    current_version_number: int | None


class ListVersionsUseCase(BaseUseCase):
    """Use case for reading a document's version history."""

    def __init__(
        self, document_service: DocumentService, version_service: VersionService
    ) -> None:
        self.document_service = document_service
        self.version_service = version_service

    async def execute(self, request: ListVersionsRequest) -> ListVersionsResponse:
        """Execute list versions use case.

        Raises:
            NotFoundError: If the document is missing or not visible
        """
        document_id = DocumentId(parse_id(request.document_id, "document_id"))
        requester_id = AccountId(parse_id(request.requester_id, "requester_id"))

        await self.document_service.get_for_reader(document_id, requester_id)
        versions = await self.version_service.list_versions(document_id)
        return ListVersionsResponse(
            versions=[VersionSummary.from_version(v) for v in versions],
            current_version_number=versions[0].version_number if versions else None,
        )
