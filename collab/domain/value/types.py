"""Domain value objects for collaboration and versioning.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import field_validator

from collab.domain.value.common import RootValueObject


class CollaboratorRole(str, Enum):
    """Role held on a document by a collaborator or offered by an invitation."""

    OWNER = "OWNER"
    ADMIN = "ADMIN"
    EDITOR = "EDITOR"
    CONTRIBUTOR = "CONTRIBUTOR"
    REVIEWER = "REVIEWER"

    @property
    def can_edit(self) -> bool:
        return self in (
            CollaboratorRole.OWNER,
            CollaboratorRole.ADMIN,
            CollaboratorRole.EDITOR,
            CollaboratorRole.CONTRIBUTOR,
        )

    @property
    def can_invite(self) -> bool:
        return self in (CollaboratorRole.OWNER, CollaboratorRole.ADMIN)


class InvitationStatus(str, Enum):
    """Status of an invitation."""

    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    DECLINED = "DECLINED"
    EXPIRED = "EXPIRED"


class InvitationOutcome(str, Enum):
    """How an invitee was resolved, used for caller-facing messaging only."""

    RESOLVED_EXISTING_USER = "resolved-existing-user"
    UNRESOLVED_WITH_EMAIL = "unresolved-with-email"
    UNRESOLVED_WITHOUT_EMAIL = "unresolved-without-email"


class DocumentKind(str, Enum):
    """Kind of collaborative document."""

    MANUSCRIPT = "manuscript"
    PROPOSAL = "proposal"

    @property
    def label(self) -> str:
        """Human-readable noun used in notifications and mail."""
        if self is DocumentKind.PROPOSAL:
            return "research proposal"
        return "manuscript"


class VersionType(str, Enum):
    """How a document version came to exist.

    RESTORE marks versions appended by a restore so they can be told apart
    from explicit saves.
    """

    MANUAL = "MANUAL"
    AUTO = "AUTO"
    MILESTONE = "MILESTONE"
    RESTORE = "RESTORE"


class NotificationType(str, Enum):
    """Type of in-app notification."""

    COLLABORATION_INVITATION = "COLLABORATION_INVITATION"


class InvitationToken(RootValueObject[str]):
    """URL-safe invitation token."""

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is not empty."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Token must be 1-255 characters")
        return v
