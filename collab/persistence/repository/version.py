"""PostgreSQL implementation of Version repository."""

from typing import Optional

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from collab.domain.model import DocumentVersion
from collab.domain.repository import VersionRepository
from collab.domain.value import DocumentId, VersionId
from collab.persistence.mappers import row_to_version, version_to_dict
from collab.persistence.tables import document_versions_table


class PostgresVersionRepository(VersionRepository):
    """PostgreSQL implementation of VersionRepository.

    Gapless numbering rests on the (document_id, version_number) unique
    constraint; losers of a race get IntegrityError and retry.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, version_id: VersionId) -> Optional[DocumentVersion]:
        stmt = select(document_versions_table).where(
            document_versions_table.c.id == version_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_version(dict(row)) if row else None

    async def find_latest(self, document_id: DocumentId) -> Optional[DocumentVersion]:
        stmt = (
            select(document_versions_table)
            .where(document_versions_table.c.document_id == document_id)
            .order_by(document_versions_table.c.version_number.desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_version(dict(row)) if row else None

    async def max_version_number(self, document_id: DocumentId) -> int:
        stmt = select(
            func.coalesce(func.max(document_versions_table.c.version_number), 0)
        ).where(document_versions_table.c.document_id == document_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def find_by_document(self, document_id: DocumentId) -> list[DocumentVersion]:
        stmt = (
            select(document_versions_table)
            .where(document_versions_table.c.document_id == document_id)
            .order_by(document_versions_table.c.version_number.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_version(dict(row)) for row in result.mappings().all()]

    async def add(self, version: DocumentVersion) -> DocumentVersion:
        async with self.session.begin_nested():
            stmt = insert(document_versions_table).values(**version_to_dict(version))
            await self.session.execute(stmt)
        return version
