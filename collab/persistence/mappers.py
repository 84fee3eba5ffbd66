"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of with SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from collab.domain.model import (
    Account,
    Collaborator,
    Document,
    DocumentVersion,
    Invitation,
    Notification,
)
from collab.domain.value import (
    AccountId,
    CollaboratorId,
    CollaboratorRole,
    DocumentId,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    NotificationId,
    NotificationType,
    VersionId,
    VersionType,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> UUID | None:
    return _uuid(value) if value is not None else None


def row_to_account(row: Dict[str, Any]) -> Account:
    """Convert database row to Account domain model."""
    return Account(
        id=AccountId(_uuid(row["id"])),
        orcid_id=row.get("orcid_id"),
        email=row.get("email"),
        given_name=row.get("given_name"),
        family_name=row.get("family_name"),
        orcid_given_names=row.get("orcid_given_names"),
        orcid_family_name=row.get("orcid_family_name"),
        primary_institution=row.get("primary_institution"),
    )


def account_to_dict(account: Account) -> Dict[str, Any]:
    return account.model_dump()


def row_to_document(row: Dict[str, Any]) -> Document:
    """Convert database row to Document domain model."""
    return Document(
        id=DocumentId(_uuid(row["id"])),
        title=row["title"],
        type=row["type"],
        creator_id=AccountId(_uuid(row["creator_id"])),
        content=row.get("content"),
        created_at=row["created_at"],
    )


def document_to_dict(document: Document) -> Dict[str, Any]:
    return document.model_dump()


def row_to_collaborator(row: Dict[str, Any]) -> Collaborator:
    """Convert database row to Collaborator domain model."""
    invited_by = _optional_uuid(row.get("invited_by"))
    return Collaborator(
        id=CollaboratorId(_uuid(row["id"])),
        document_id=DocumentId(_uuid(row["document_id"])),
        account_id=AccountId(_uuid(row["account_id"])),
        role=CollaboratorRole(row["role"]),
        can_edit=row["can_edit"],
        can_invite=row["can_invite"],
        can_delete=row["can_delete"],
        invited_by=AccountId(invited_by) if invited_by else None,
        joined_at=row["joined_at"],
    )


def collaborator_to_dict(collaborator: Collaborator) -> Dict[str, Any]:
    """Convert Collaborator to database dict.

    ``is_creator`` is derived for roster views and is not stored.
    """
    data = collaborator.model_dump(exclude={"is_creator"})
    data["role"] = collaborator.role.value
    return data


def row_to_invitation(row: Dict[str, Any]) -> Invitation:
    """Convert database row to Invitation domain model."""
    invited_account_id = _optional_uuid(row.get("invited_account_id"))
    return Invitation(
        id=InvitationId(_uuid(row["id"])),
        document_id=DocumentId(_uuid(row["document_id"])),
        inviter_id=AccountId(_uuid(row["inviter_id"])),
        invited_account_id=AccountId(invited_account_id) if invited_account_id else None,
        orcid_id=row.get("orcid_id"),
        email=row.get("email"),
        given_name=row.get("given_name"),
        family_name=row.get("family_name"),
        affiliation=row.get("affiliation"),
        role=CollaboratorRole(row["role"]),
        status=InvitationStatus(row["status"]),
        message=row.get("message"),
        token=InvitationToken(row["token"]),
        created_at=row["created_at"],
        expires_at=row["expires_at"],
        responded_at=row.get("responded_at"),
    )


def invitation_to_dict(invitation: Invitation) -> Dict[str, Any]:
    data = invitation.model_dump()
    data["role"] = invitation.role.value
    data["status"] = invitation.status.value
    data["token"] = invitation.token.root
    return data


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    document_id = _optional_uuid(row.get("document_id"))
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        account_id=AccountId(_uuid(row["account_id"])),
        document_id=DocumentId(document_id) if document_id else None,
        type=NotificationType(row["type"]),
        title=row["title"],
        message=row["message"],
        data=row.get("data") or {},
        is_read=row["is_read"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    data = notification.model_dump()
    data["type"] = notification.type.value
    return data


def row_to_version(row: Dict[str, Any]) -> DocumentVersion:
    """Convert database row to DocumentVersion domain model.

    ``word_count`` is stored for listing queries but always re-derived from
    content on the model.
    """
    restored_from = _optional_uuid(row.get("restored_from_version_id"))
    return DocumentVersion(
        id=VersionId(_uuid(row["id"])),
        document_id=DocumentId(_uuid(row["document_id"])),
        version_number=row["version_number"],
        title=row["title"],
        content=row["content"],
        description=row.get("description"),
        version_type=VersionType(row["version_type"]),
        creator_id=AccountId(_uuid(row["creator_id"])),
        restored_from_version_id=VersionId(restored_from) if restored_from else None,
        created_at=row["created_at"],
    )


def version_to_dict(version: DocumentVersion) -> Dict[str, Any]:
    data = version.model_dump()
    data["version_type"] = version.version_type.value
    data["word_count"] = version.word_count
    return data
