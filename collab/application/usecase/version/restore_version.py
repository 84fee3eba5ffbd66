"""Restore version use case."""

import logfire
from pydantic import BaseModel

from collab.application.usecase.base import BaseUseCase, parse_id
from collab.application.usecase.version.items import VersionDetail
from collab.domain.service import DocumentService, VersionService
from collab.domain.value import AccountId, DocumentId, VersionId


class RestoreVersionRequest(BaseModel):
    """Restore version request."""

    document_id: str
    version_id: str
    account_id: str  # Account ID from auth


class RestoreVersionResponse(BaseModel):
    """Restore version response.

    The caller applies ``version.content`` back to the live editor.
    """

    version: VersionDetail
    restored_from_version_number: int


class RestoreVersionUseCase(BaseUseCase):
    """Use case for restoring a document to an earlier version."""

    def __init__(
        self, document_service: DocumentService, version_service: VersionService
    ) -> None:
        self.document_service = document_service
        self.version_service = version_service

    async def execute(self, request: RestoreVersionRequest) -> RestoreVersionResponse:
        """Execute restore version use case.

        Raises:
            NotFoundError: If the document or version is missing or not visible
            ValidationError: If the account may not edit the document
        """
        document_id = DocumentId(parse_id(request.document_id, "document_id"))
        version_id = VersionId(parse_id(request.version_id, "version_id"))
        account_id = AccountId(parse_id(request.account_id, "account_id"))

        with logfire.span(
            "restore_version",
            document_id=str(document_id),
            version_id=str(version_id),
        ):
            document = await self.document_service.get_for_editor(
                document_id, account_id
            )
            target = await self.version_service.get_version(document_id, version_id)
            restored = await self.version_service.restore_version(
                document, target, account_id
            )
            return RestoreVersionResponse(
                version=VersionDetail.from_version(restored),
                restored_from_version_number=target.version_number,
            )
