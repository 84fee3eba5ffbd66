"""Notification entity."""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from collab.domain.model.common import DomainModel, utc_now
from collab.domain.value import AccountId, DocumentId, NotificationId, NotificationType


class Notification(DomainModel):
    """In-app notification addressed to one account."""

    id: NotificationId
    account_id: AccountId
    document_id: Optional[DocumentId] = None
    type: NotificationType
    title: str
    message: str
    data: dict[str, Any] = Field(default_factory=dict)  # Machine-readable payload
    is_read: bool = False
    created_at: datetime = Field(default_factory=utc_now)
