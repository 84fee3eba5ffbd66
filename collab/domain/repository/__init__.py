"""Repository interfaces for the collaboration domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from collab.domain.repository.account import AccountRepository
from collab.domain.repository.collaborator import CollaboratorRepository
from collab.domain.repository.document import DocumentRepository
from collab.domain.repository.invitation import InvitationRepository
from collab.domain.repository.notification import NotificationRepository
from collab.domain.repository.unit_of_work import UnitOfWork
from collab.domain.repository.version import VersionRepository

__all__ = [
    "AccountRepository",
    "CollaboratorRepository",
    "DocumentRepository",
    "InvitationRepository",
    "NotificationRepository",
    "UnitOfWork",
    "VersionRepository",
]
