"""Document version history domain service."""

from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from collab.config import VersionSettings
from collab.domain.error import NotFoundError, VersionConflictError
from collab.domain.model import Document, DocumentVersion, utc_now
from collab.domain.repository import VersionRepository
from collab.domain.value import AccountId, DocumentId, VersionId, VersionType

from .base import Service


class VersionService(Service):
    """Domain service for the append-only version history of a document."""

    def __init__(
        self, version_repository: VersionRepository, settings: VersionSettings
    ) -> None:
        """Initialize version service.

        Args:
            version_repository: Version repository
            settings: Version settings
        """
        self.version_repository = version_repository
        self.settings = settings

    async def create_version(
        self,
        document_id: DocumentId,
        creator_id: AccountId,
        title: str,
        content: str,
        description: str | None = None,
        version_type: VersionType = VersionType.MANUAL,
        restored_from_version_id: VersionId | None = None,
    ) -> DocumentVersion:
        """Append a snapshot with the next version number.

        The number is claimed under the (document, version number) unique
        constraint; a concurrent save that wins the number forces a re-read
        and another attempt.

        Args:
            document_id: Document the snapshot belongs to
            creator_id: Account creating the snapshot
            title: Title at snapshot time
            content: Content at snapshot time
            description: Optional note describing the snapshot
            version_type: Why the snapshot was taken
            restored_from_version_id: Source version for RESTORE snapshots

        Returns:
            Created version

        Raises:
            VersionConflictError: If every attempt lost the race
        """
        with logfire.span(
            "version_service.create_version",
            document_id=str(document_id),
            version_type=version_type.value,
        ):
            for attempt in range(1, self.settings.max_insert_attempts + 1):
                number = await self.version_repository.max_version_number(document_id) + 1
                version = DocumentVersion(
                    id=VersionId(uuid4()),
                    document_id=document_id,
                    version_number=number,
                    title=title,
                    content=content,
                    description=description,
                    version_type=version_type,
                    creator_id=creator_id,
                    restored_from_version_id=restored_from_version_id,
                    created_at=utc_now(),
                )
                try:
                    saved = await self.version_repository.add(version)
                except IntegrityError:
                    logfire.warn(
                        "Version number taken, retrying",
                        document_id=str(document_id),
                        version_number=number,
                        attempt=attempt,
                    )
                    continue

                logfire.info(
                    "Version created",
                    document_id=str(document_id),
                    version_id=str(saved.id),
                    version_number=saved.version_number,
                )
                return saved

            logfire.error(
                "Gave up claiming a version number",
                document_id=str(document_id),
                attempts=self.settings.max_insert_attempts,
            )
            raise VersionConflictError(
                f"Could not save a version of document {document_id}, try again"
            )

    async def get_version(
        self, document_id: DocumentId, version_id: VersionId
    ) -> DocumentVersion:
        """Get a version of a document.

        Raises:
            NotFoundError: If the version does not exist or belongs to another document
        """
        version = await self.version_repository.find_by_id(version_id)
        if not version or version.document_id != document_id:
            logfire.warn(
                "Version not found",
                document_id=str(document_id),
                version_id=str(version_id),
            )
            raise NotFoundError("Version", str(version_id))
        return version

    async def list_versions(self, document_id: DocumentId) -> list[DocumentVersion]:
        """List versions of a document, newest first."""
        return await self.version_repository.find_by_document(document_id)

    async def restore_version(
        self, document: Document, target: DocumentVersion, account_id: AccountId
    ) -> DocumentVersion:
        """Restore an earlier version by appending a copy of it.

        History is never rewritten. If the document's live title or content
        differs from the current version, it is saved first as an AUTO backup.

        Args:
            document: Document being restored
            target: Version to restore, loaded with get_version
            account_id: Account performing the restore

        Returns:
            The new RESTORE version

        Raises:
            NotFoundError: If the version does not belong to the document
        """
        with logfire.span(
            "version_service.restore_version",
            document_id=str(document.id),
            version_id=str(target.id),
        ):
            if target.document_id != document.id:
                raise NotFoundError("Version", str(target.id))

            if document.content is not None:
                latest = await self.version_repository.find_latest(document.id)
                if latest is None or (latest.title, latest.content) != (
                    document.title,
                    document.content,
                ):
                    await self.create_version(
                        document.id,
                        account_id,
                        title=document.title,
                        content=document.content,
                        description="Backup before restoring version "
                        f"{target.version_number}",
                        version_type=VersionType.AUTO,
                    )

            restored = await self.create_version(
                document.id,
                account_id,
                title=target.title,
                content=target.content,
                description=f"Restored from version {target.version_number}",
                version_type=VersionType.RESTORE,
                restored_from_version_id=target.id,
            )
            logfire.info(
                "Version restored",
                document_id=str(document.id),
                restored_from=target.version_number,
                version_number=restored.version_number,
            )
            return restored
