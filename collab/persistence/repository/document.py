"""PostgreSQL implementation of Document repository."""

from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from collab.domain.model import Document
from collab.domain.repository import DocumentRepository
from collab.domain.value import DocumentId
from collab.persistence.mappers import document_to_dict, row_to_document
from collab.persistence.tables import documents_table


class PostgresDocumentRepository(DocumentRepository):
    """PostgreSQL implementation of DocumentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, document_id: DocumentId) -> Optional[Document]:
        stmt = select(documents_table).where(documents_table.c.id == document_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_document(dict(row)) if row else None

    async def save(self, document: Document) -> Document:
        document_dict = document_to_dict(document)

        existing = await self.find_by_id(document.id)
        if existing:
            stmt = (
                update(documents_table)
                .where(documents_table.c.id == document.id)
                .values(**document_dict)
            )
        else:
            stmt = insert(documents_table).values(**document_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return document
