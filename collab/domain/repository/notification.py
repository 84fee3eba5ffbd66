"""Notification repository interface."""

from abc import ABC, abstractmethod

from collab.domain.model import Notification
from collab.domain.value import AccountId


class NotificationRepository(ABC):
    """Repository for Notification entity."""

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Persist a notification.

        A failure here must leave the surrounding transaction usable.
        """
        pass

    @abstractmethod
    async def find_by_account(
        self, account_id: AccountId, limit: int = 50
    ) -> list[Notification]:
        """List notifications for an account, newest first."""
        pass
