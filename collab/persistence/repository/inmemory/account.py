"""In-memory account repository for testing."""

from typing import Optional

from collab.domain.model import Account
from collab.domain.repository import AccountRepository
from collab.domain.value import AccountId


class InMemoryAccountRepository(AccountRepository):
    """In-memory implementation of AccountRepository for testing."""

    def __init__(self) -> None:
        self._accounts: dict[AccountId, Account] = {}

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        return self._accounts.get(account_id)

    async def find_by_orcid(self, orcid_id: str) -> Optional[Account]:
        for account in self._accounts.values():
            if account.orcid_id == orcid_id:
                return account
        return None

    async def find_by_email(self, email: str) -> Optional[Account]:
        for account in self._accounts.values():
            if account.email and account.email.lower() == email.lower():
                return account
        return None

    async def save(self, account: Account) -> Account:
        self._accounts[account.id] = account
        return account
