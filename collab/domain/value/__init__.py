"""Domain value objects for the collaboration core."""

from collab.domain.value.identifiers import (
    AccountId,
    CollaboratorId,
    DocumentId,
    InvitationId,
    NotificationId,
    VersionId,
)
from collab.domain.value.types import (
    CollaboratorRole,
    DocumentKind,
    InvitationOutcome,
    InvitationStatus,
    InvitationToken,
    NotificationType,
    VersionType,
)

__all__ = [
    # Identifiers
    "AccountId",
    "CollaboratorId",
    "DocumentId",
    "InvitationId",
    "NotificationId",
    "VersionId",
    # Types
    "CollaboratorRole",
    "DocumentKind",
    "InvitationOutcome",
    "InvitationStatus",
    "InvitationToken",
    "NotificationType",
    "VersionType",
]
