"""PostgreSQL implementation of Collaborator repository."""

from typing import Optional

from sqlalchemy import and_, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from collab.domain.model import Collaborator
from collab.domain.repository import CollaboratorRepository
from collab.domain.value import AccountId, DocumentId
from collab.persistence.mappers import collaborator_to_dict, row_to_collaborator
from collab.persistence.tables import collaborators_table


class PostgresCollaboratorRepository(CollaboratorRepository):
    """PostgreSQL implementation of CollaboratorRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find(
        self, document_id: DocumentId, account_id: AccountId
    ) -> Optional[Collaborator]:
        stmt = select(collaborators_table).where(
            and_(
                collaborators_table.c.document_id == document_id,
                collaborators_table.c.account_id == account_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_collaborator(dict(row)) if row else None

    async def find_by_document(self, document_id: DocumentId) -> list[Collaborator]:
        stmt = (
            select(collaborators_table)
            .where(collaborators_table.c.document_id == document_id)
            .order_by(collaborators_table.c.joined_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_collaborator(dict(row)) for row in result.mappings().all()]

    async def save(self, collaborator: Collaborator) -> Collaborator:
        collaborator_dict = collaborator_to_dict(collaborator)

        existing = await self.find(collaborator.document_id, collaborator.account_id)
        if existing and existing.id == collaborator.id:
            stmt = (
                update(collaborators_table)
                .where(collaborators_table.c.id == collaborator.id)
                .values(**collaborator_dict)
            )
        else:
            # A second membership for the same account violates the unique constraint
            stmt = insert(collaborators_table).values(**collaborator_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return collaborator
