"""PostgreSQL implementation of Invitation repository."""

from typing import Optional

from sqlalchemy import and_, func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from collab.domain.model import Invitation
from collab.domain.repository import InvitationRepository
from collab.domain.value import (
    AccountId,
    DocumentId,
    InvitationId,
    InvitationStatus,
)
from collab.persistence.mappers import invitation_to_dict, row_to_invitation
from collab.persistence.tables import invitations_table


class PostgresInvitationRepository(InvitationRepository):
    """PostgreSQL implementation of InvitationRepository.

    Pending uniqueness is enforced by partial unique indexes on
    (document, account), (document, ORCID) and (document, lower(email)).
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        stmt = select(invitations_table).where(invitations_table.c.id == invitation_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_pending_matching(
        self,
        document_id: DocumentId,
        account_id: AccountId | None,
        orcid_id: str | None,
        email: str | None,
    ) -> list[Invitation]:
        conditions = []
        if account_id:
            conditions.append(invitations_table.c.invited_account_id == account_id)
        if orcid_id:
            conditions.append(invitations_table.c.orcid_id == orcid_id)
        if email:
            conditions.append(func.lower(invitations_table.c.email) == email.lower())
        if not conditions:
            return []

        stmt = select(invitations_table).where(
            and_(
                invitations_table.c.document_id == document_id,
                invitations_table.c.status == InvitationStatus.PENDING.value,
                or_(*conditions),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_invitation(dict(row)) for row in result.mappings().all()]

    async def find_by_document(
        self,
        document_id: DocumentId,
        status: InvitationStatus | None = None,
    ) -> list[Invitation]:
        stmt = select(invitations_table).where(
            invitations_table.c.document_id == document_id
        )
        if status:
            stmt = stmt.where(invitations_table.c.status == status.value)
        stmt = stmt.order_by(invitations_table.c.created_at.desc())

        result = await self.session.execute(stmt)
        return [row_to_invitation(dict(row)) for row in result.mappings().all()]

    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update).

        Inserts run in a SAVEPOINT so a unique violation leaves the request
        transaction usable.

        Raises:
            IntegrityError: If a pending invitation already exists for the
                same document and identity
        """
        invitation_dict = invitation_to_dict(invitation)

        existing = await self.find_by_id(invitation.id)
        if existing:
            stmt = (
                update(invitations_table)
                .where(invitations_table.c.id == invitation.id)
                .values(**invitation_dict)
            )
            await self.session.execute(stmt)
        else:
            async with self.session.begin_nested():
                stmt = insert(invitations_table).values(**invitation_dict)
                await self.session.execute(stmt)

        await self.session.flush()
        return invitation
