"""In-memory notification repository for testing."""

from collab.domain.model import Notification
from collab.domain.repository import NotificationRepository
from collab.domain.value import AccountId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing.

    Set ``fail`` to simulate a store outage.
    """

    def __init__(self) -> None:
        self._notifications: list[Notification] = []
        self.fail = False

    async def save(self, notification: Notification) -> Notification:
        if self.fail:
            raise ConnectionError("Notification store unavailable")
        self._notifications.append(notification)
        return notification

    async def find_by_account(
        self, account_id: AccountId, limit: int = 50
    ) -> list[Notification]:
        notifications = [n for n in self._notifications if n.account_id == account_id]
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        return notifications[:limit]
