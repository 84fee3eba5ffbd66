"""Document version entity."""

import html
import re
from datetime import datetime
from typing import Optional

from pydantic import Field

from collab.domain.model.common import DomainModel, utc_now
from collab.domain.value import AccountId, DocumentId, VersionId, VersionType

_TAG_RE = re.compile(r"<[^>]*>")


def count_words(content: str | None) -> int:
    """Count whitespace-delimited words in HTML content with tags removed."""
    if not content:
        return 0
    text = html.unescape(_TAG_RE.sub(" ", content))
    return len(text.split())


class DocumentVersion(DomainModel):
    """Immutable snapshot of a document's title and content.

    Business rules:
    - Version numbers start at 1 and are gapless per document
    - The highest number is the current version
    - Versions are never edited or deleted
    """

    id: VersionId
    document_id: DocumentId
    version_number: int = Field(ge=1)
    title: str
    content: str
    description: Optional[str] = None
    version_type: VersionType = VersionType.MANUAL
    creator_id: AccountId
    restored_from_version_id: Optional[VersionId] = None
    created_at: datetime = Field(default_factory=utc_now)

    @property
    def word_count(self) -> int:
        return count_words(self.content)
