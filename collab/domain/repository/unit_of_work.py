"""Unit of work interface."""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Transaction boundary for a request.

    Lets a use case make its primary write durable before running side
    effects that must not roll it back.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Commit everything written so far in this request."""
        pass
