"""Domain services."""

from .base import Service
from .document_service import DocumentService
from .identity_service import IdentityService, OrcidClient, ResolvedInvitee
from .invitation_service import InvitationService
from .jwt_service import JWTService
from .mail_service import CollaborationInviteMail, MailClient, MailResult, MailService
from .notification_service import NotificationService
from .version_service import VersionService

__all__ = [
    "CollaborationInviteMail",
    "DocumentService",
    "IdentityService",
    "InvitationService",
    "JWTService",
    "MailClient",
    "MailResult",
    "MailService",
    "NotificationService",
    "OrcidClient",
    "ResolvedInvitee",
    "Service",
    "VersionService",
]
