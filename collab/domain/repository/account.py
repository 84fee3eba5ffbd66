"""Account repository interface."""

from abc import ABC, abstractmethod

from collab.domain.model import Account
from collab.domain.value import AccountId


class AccountRepository(ABC):
    """Read access to the portal's account directory."""

    @abstractmethod
    async def find_by_id(self, account_id: AccountId) -> Account | None:
        """Find an account by ID."""
        pass

    @abstractmethod
    async def find_by_orcid(self, orcid_id: str) -> Account | None:
        """Find an account by ORCID iD.

        Args:
            orcid_id: Bare ORCID iD

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Account | None:
        """Find an account by email, case-insensitively.

        Args:
            email: Email address

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, account: Account) -> Account:
        """Save an account (create or update)."""
        pass
