"""Document entity (manuscript or grant proposal)."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from collab.domain.model.common import DomainModel, utc_now
from collab.domain.value import AccountId, DocumentId, DocumentKind


class Document(DomainModel):
    """Collaborative document.

    ``content`` is the live editing surface's current state. Version history
    is kept separately and never written back here by this core.
    """

    id: DocumentId
    title: str
    type: str = "manuscript"  # Free text, e.g. "research_article", "grant_proposal"
    creator_id: AccountId
    content: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)

    @property
    def kind(self) -> DocumentKind:
        if "proposal" in self.type.lower():
            return DocumentKind.PROPOSAL
        return DocumentKind.MANUSCRIPT
