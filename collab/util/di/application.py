"""Application layer DI providers."""

from dishka import Scope, provide

from collab.application.usecase.collaborator import ListCollaboratorsUseCase
from collab.application.usecase.invitation import (
    CreateInvitationUseCase,
    ListInvitationsUseCase,
)
from collab.application.usecase.version import (
    CreateVersionUseCase,
    GetVersionUseCase,
    ListVersionsUseCase,
    RestoreVersionUseCase,
)
from collab.domain.repository import UnitOfWork
from collab.domain.service import (
    DocumentService,
    IdentityService,
    InvitationService,
    MailService,
    NotificationService,
    VersionService,
)
from collab.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Invitation use cases
    @provide(scope=Scope.REQUEST)
    def get_create_invitation_use_case(
        self,
        document_service: DocumentService,
        identity_service: IdentityService,
        invitation_service: InvitationService,
        notification_service: NotificationService,
        mail_service: MailService,
        unit_of_work: UnitOfWork,
    ) -> CreateInvitationUseCase:
        """Provide create invitation use case."""
        return CreateInvitationUseCase(
            document_service=document_service,
            identity_service=identity_service,
            invitation_service=invitation_service,
            notification_service=notification_service,
            mail_service=mail_service,
            unit_of_work=unit_of_work,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_invitations_use_case(
        self,
        document_service: DocumentService,
        invitation_service: InvitationService,
    ) -> ListInvitationsUseCase:
        """Provide list invitations use case."""
        return ListInvitationsUseCase(
            document_service=document_service, invitation_service=invitation_service
        )

    # Collaborator use cases
    @provide(scope=Scope.REQUEST)
    def get_list_collaborators_use_case(
        self,
        document_service: DocumentService,
        identity_service: IdentityService,
        invitation_service: InvitationService,
    ) -> ListCollaboratorsUseCase:
        """Provide list collaborators use case."""
        return ListCollaboratorsUseCase(
            document_service=document_service,
            identity_service=identity_service,
            invitation_service=invitation_service,
        )

    # Version use cases
    @provide(scope=Scope.REQUEST)
    def get_create_version_use_case(
        self, document_service: DocumentService, version_service: VersionService
    ) -> CreateVersionUseCase:
        """Provide create version use case."""
        return CreateVersionUseCase(
            document_service=document_service, version_service=version_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_version_use_case(
        self, document_service: DocumentService, version_service: VersionService
    ) -> GetVersionUseCase:
        """Provide get version use case."""
        return GetVersionUseCase(
            document_service=document_service, version_service=version_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_versions_use_case(
        self, document_service: DocumentService, version_service: VersionService
    ) -> ListVersionsUseCase:
        """Provide list versions use case."""
        return ListVersionsUseCase(
            document_service=document_service, version_service=version_service
        )

    @provide(scope=Scope.REQUEST)
    def get_restore_version_use_case(
        self, document_service: DocumentService, version_service: VersionService
    ) -> RestoreVersionUseCase:
        """Provide restore version use case."""
        return RestoreVersionUseCase(
            document_service=document_service, version_service=version_service
        )
