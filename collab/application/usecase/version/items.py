"""Version response items shared by version use cases."""

from datetime import datetime

from pydantic import BaseModel

from collab.domain.model import DocumentVersion
from collab.domain.value import VersionType


class VersionSummary(BaseModel):
    """Version listing entry, without content."""

    version_id: str
    document_id: str
    version_number: int
    title: str
    description: str | None
    version_type: VersionType
    word_count: int
    creator_id: str
    restored_from_version_id: str | None
    created_at: datetime

    @classmethod
    def from_version(cls, version: DocumentVersion) -> "VersionSummary":
        return cls(
            version_id=str(version.id),
            document_id=str(version.document_id),
            version_number=version.version_number,
            title=version.title,
            description=version.description,
            version_type=version.version_type,
            word_count=version.word_count,
            creator_id=str(version.creator_id),
            restored_from_version_id=(
                str(version.restored_from_version_id)
                if version.restored_from_version_id
                else None
            ),
            created_at=version.created_at,
        )


class VersionDetail(VersionSummary):
    """Full version including content."""

    content: str

    @classmethod
    def from_version(cls, version: DocumentVersion) -> "VersionDetail":
        summary = VersionSummary.from_version(version)
        return cls(**summary.model_dump(), content=version.content)
