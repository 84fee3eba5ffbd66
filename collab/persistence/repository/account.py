"""PostgreSQL implementation of Account repository."""

from typing import Optional

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from collab.domain.model import Account
from collab.domain.repository import AccountRepository
from collab.domain.value import AccountId
from collab.persistence.mappers import account_to_dict, row_to_account
from collab.persistence.tables import accounts_table


class PostgresAccountRepository(AccountRepository):
    """PostgreSQL implementation of AccountRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        stmt = select(accounts_table).where(accounts_table.c.id == account_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_account(dict(row)) if row else None

    async def find_by_orcid(self, orcid_id: str) -> Optional[Account]:
        stmt = select(accounts_table).where(accounts_table.c.orcid_id == orcid_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_account(dict(row)) if row else None

    async def find_by_email(self, email: str) -> Optional[Account]:
        stmt = (
            select(accounts_table)
            .where(func.lower(accounts_table.c.email) == email.lower())
            .order_by(accounts_table.c.created_at)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_account(dict(row)) if row else None

    async def save(self, account: Account) -> Account:
        account_dict = account_to_dict(account)

        existing = await self.find_by_id(account.id)
        if existing:
            stmt = (
                update(accounts_table)
                .where(accounts_table.c.id == account.id)
                .values(**account_dict)
            )
        else:
            stmt = insert(accounts_table).values(**account_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return account
