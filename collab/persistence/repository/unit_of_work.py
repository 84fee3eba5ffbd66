"""SQLAlchemy session-backed unit of work."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from collab.domain.repository import UnitOfWork


class SessionUnitOfWork(UnitOfWork):
    """Commits the request's session early.

    The DI provider still commits or rolls back at the end of the request;
    work after an early commit runs in a fresh transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def commit(self) -> None:
        await self.session.commit()
        logfire.info("Unit of work committed")
