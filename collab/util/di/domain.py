"""Domain layer DI providers."""

from dishka import Scope, provide

from collab.config import AuthSettings, InvitationSettings, VersionSettings
from collab.domain.repository import (
    AccountRepository,
    CollaboratorRepository,
    DocumentRepository,
    InvitationRepository,
    NotificationRepository,
    VersionRepository,
)
from collab.domain.service import (
    DocumentService,
    IdentityService,
    InvitationService,
    JWTService,
    MailClient,
    MailService,
    NotificationService,
    OrcidClient,
    VersionService,
)
from collab.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_document_service(
        self,
        document_repository: DocumentRepository,
        collaborator_repository: CollaboratorRepository,
    ) -> DocumentService:
        return DocumentService(
            document_repository=document_repository,
            collaborator_repository=collaborator_repository,
        )

    @provide
    def get_identity_service(
        self, account_repository: AccountRepository, orcid_client: OrcidClient
    ) -> IdentityService:
        return IdentityService(
            account_repository=account_repository, orcid_client=orcid_client
        )

    @provide
    def get_invitation_service(
        self,
        invitation_repository: InvitationRepository,
        collaborator_repository: CollaboratorRepository,
        settings: InvitationSettings,
    ) -> InvitationService:
        return InvitationService(
            invitation_repository=invitation_repository,
            collaborator_repository=collaborator_repository,
            settings=settings,
        )

    @provide
    def get_notification_service(
        self, notification_repository: NotificationRepository
    ) -> NotificationService:
        return NotificationService(notification_repository=notification_repository)

    @provide
    def get_mail_service(self, mail_client: MailClient) -> MailService:
        return MailService(mail_client=mail_client)

    @provide
    def get_version_service(
        self, version_repository: VersionRepository, settings: VersionSettings
    ) -> VersionService:
        return VersionService(version_repository=version_repository, settings=settings)
