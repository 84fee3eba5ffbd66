"""Collaborator entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from collab.domain.model.common import DomainModel, utc_now
from collab.domain.value import AccountId, CollaboratorId, CollaboratorRole, DocumentId


class Collaborator(DomainModel):
    """Active membership of an account on a document.

    Business rules:
    - One row per (document, account)
    - An invitation must not be created for an account that already has one
    """

    id: CollaboratorId
    document_id: DocumentId
    account_id: AccountId
    role: CollaboratorRole = CollaboratorRole.CONTRIBUTOR
    can_edit: bool = True
    can_invite: bool = False
    can_delete: bool = False
    invited_by: Optional[AccountId] = None
    joined_at: datetime = Field(default_factory=utc_now)
    is_creator: bool = False  # Synthesised roster entry for the document creator
