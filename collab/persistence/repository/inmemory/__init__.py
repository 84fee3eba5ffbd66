"""In-memory repository implementations for testing."""

from .account import InMemoryAccountRepository
from .collaborator import InMemoryCollaboratorRepository
from .document import InMemoryDocumentRepository
from .invitation import InMemoryInvitationRepository
from .notification import InMemoryNotificationRepository
from .unit_of_work import InMemoryUnitOfWork
from .version import InMemoryVersionRepository

__all__ = [
    "InMemoryAccountRepository",
    "InMemoryCollaboratorRepository",
    "InMemoryDocumentRepository",
    "InMemoryInvitationRepository",
    "InMemoryNotificationRepository",
    "InMemoryUnitOfWork",
    "InMemoryVersionRepository",
]
