"""PostgreSQL repository implementations."""

from collab.persistence.repository.account import PostgresAccountRepository
from collab.persistence.repository.collaborator import PostgresCollaboratorRepository
from collab.persistence.repository.document import PostgresDocumentRepository
from collab.persistence.repository.invitation import PostgresInvitationRepository
from collab.persistence.repository.notification import PostgresNotificationRepository
from collab.persistence.repository.unit_of_work import SessionUnitOfWork
from collab.persistence.repository.version import PostgresVersionRepository

__all__ = [
    "PostgresAccountRepository",
    "PostgresCollaboratorRepository",
    "PostgresDocumentRepository",
    "PostgresInvitationRepository",
    "PostgresNotificationRepository",
    "PostgresVersionRepository",
    "SessionUnitOfWork",
]
