"""PostgreSQL implementation of Notification repository."""

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from collab.domain.model import Notification
from collab.domain.repository import NotificationRepository
from collab.domain.value import AccountId
from collab.persistence.mappers import notification_to_dict, row_to_notification
from collab.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, notification: Notification) -> Notification:
        # Own SAVEPOINT: a failed insert must not poison the request transaction
        async with self.session.begin_nested():
            stmt = insert(notifications_table).values(
                **notification_to_dict(notification)
            )
            await self.session.execute(stmt)
        return notification

    async def find_by_account(
        self, account_id: AccountId, limit: int = 50
    ) -> list[Notification]:
        stmt = (
            select(notifications_table)
            .where(notifications_table.c.account_id == account_id)
            .order_by(notifications_table.c.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(dict(row)) for row in result.mappings().all()]
