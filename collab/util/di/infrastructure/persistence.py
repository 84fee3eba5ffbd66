"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from collab.config import Settings
from collab.domain.repository import (
    AccountRepository,
    CollaboratorRepository,
    DocumentRepository,
    InvitationRepository,
    NotificationRepository,
    UnitOfWork,
    VersionRepository,
)
from collab.persistence.database import create_engine, create_session_factory
from collab.persistence.repository import (
    PostgresAccountRepository,
    PostgresCollaboratorRepository,
    PostgresDocumentRepository,
    PostgresInvitationRepository,
    PostgresNotificationRepository,
    PostgresVersionRepository,
    SessionUnitOfWork,
)
from collab.util.di.base import ProviderBase
from collab.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()
        logfire.info("Database engine disposed")

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if one was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, session: AsyncSession) -> UnitOfWork:
        return SessionUnitOfWork(session)

    @provide(scope=Scope.REQUEST)
    def get_account_repository(self, session: AsyncSession) -> AccountRepository:
        return PostgresAccountRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_document_repository(self, session: AsyncSession) -> DocumentRepository:
        return PostgresDocumentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_collaborator_repository(
        self, session: AsyncSession
    ) -> CollaboratorRepository:
        return PostgresCollaboratorRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_invitation_repository(self, session: AsyncSession) -> InvitationRepository:
        return PostgresInvitationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_notification_repository(
        self, session: AsyncSession
    ) -> NotificationRepository:
        return PostgresNotificationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_version_repository(self, session: AsyncSession) -> VersionRepository:
        return PostgresVersionRepository(session)
