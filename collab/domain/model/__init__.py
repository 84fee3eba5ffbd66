"""Domain model entities for the collaboration core."""

from collab.domain.model.account import Account
from collab.domain.model.collaborator import Collaborator
from collab.domain.model.common import utc_now
from collab.domain.model.document import Document
from collab.domain.model.invitation import Invitation
from collab.domain.model.notification import Notification
from collab.domain.model.version import DocumentVersion

__all__ = [
    "Account",
    "Collaborator",
    "Document",
    "DocumentVersion",
    "Invitation",
    "Notification",
    "utc_now",
]
