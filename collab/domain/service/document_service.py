"""Document access domain service."""

from uuid import uuid4

import logfire

from collab.domain.error import NotFoundError, ValidationError
from collab.domain.model import Collaborator, Document
from collab.domain.repository import CollaboratorRepository, DocumentRepository
from collab.domain.value import AccountId, CollaboratorId, CollaboratorRole, DocumentId

from .base import Service

INSUFFICIENT_PERMISSION = "Document not found or insufficient permission"


class DocumentService(Service):
    """Domain service answering who may do what on a document.

    Authorization proper happens before our operations are invoked; these
    checks re-validate document existence and the caller's relationship.
    """

    def __init__(
        self,
        document_repository: DocumentRepository,
        collaborator_repository: CollaboratorRepository,
    ) -> None:
        """Initialize document service.

        Args:
            document_repository: Document repository
            collaborator_repository: Collaborator repository
        """
        self.document_repository = document_repository
        self.collaborator_repository = collaborator_repository

    async def get_document(self, document_id: DocumentId) -> Document:
        """Get document by ID.

        Raises:
            NotFoundError: If document not found
        """
        document = await self.document_repository.find_by_id(document_id)
        if not document:
            logfire.warn("Document not found", document_id=str(document_id))
            raise NotFoundError("Document", str(document_id))
        return document

    async def get_membership(
        self, document: Document, account_id: AccountId
    ) -> Collaborator | None:
        return await self.collaborator_repository.find(document.id, account_id)

    async def is_member(self, document: Document, account_id: AccountId) -> bool:
        """Creator or any collaborator."""
        if document.creator_id == account_id:
            return True
        return await self.get_membership(document, account_id) is not None

    async def can_invite(self, document: Document, account_id: AccountId) -> bool:
        """Creator or a collaborator flagged ``can_invite``."""
        if document.creator_id == account_id:
            return True
        membership = await self.get_membership(document, account_id)
        return membership is not None and membership.can_invite

    async def can_edit(self, document: Document, account_id: AccountId) -> bool:
        """Creator or a collaborator flagged ``can_edit``."""
        if document.creator_id == account_id:
            return True
        membership = await self.get_membership(document, account_id)
        return membership is not None and membership.can_edit

    async def get_for_invite(
        self, document_id: DocumentId, account_id: AccountId
    ) -> Document:
        """Get a document the account may invite collaborators to.

        Raises:
            ValidationError: If the document is missing or the account may not invite
        """
        with logfire.span(
            "document_service.get_for_invite",
            document_id=str(document_id),
            account_id=str(account_id),
        ):
            document = await self.document_repository.find_by_id(document_id)
            if not document or not await self.can_invite(document, account_id):
                logfire.warn(
                    "Invite permission check failed",
                    document_id=str(document_id),
                    account_id=str(account_id),
                )
                raise ValidationError(INSUFFICIENT_PERMISSION)
            return document

    async def get_for_member(
        self, document_id: DocumentId, account_id: AccountId
    ) -> Document:
        """Get a document the account created or collaborates on.

        Raises:
            ValidationError: If the document is missing or the account is not a member
        """
        document = await self.document_repository.find_by_id(document_id)
        if not document or not await self.is_member(document, account_id):
            logfire.warn(
                "Membership check failed",
                document_id=str(document_id),
                account_id=str(account_id),
            )
            raise ValidationError(INSUFFICIENT_PERMISSION)
        return document

    async def get_for_reader(
        self, document_id: DocumentId, account_id: AccountId
    ) -> Document:
        """Get a document the account may read.

        Documents the account has no relationship to are reported as missing.

        Raises:
            NotFoundError: If the document is missing or not visible to the account
        """
        document = await self.document_repository.find_by_id(document_id)
        if not document or not await self.is_member(document, account_id):
            logfire.warn(
                "Document not visible",
                document_id=str(document_id),
                account_id=str(account_id),
            )
            raise NotFoundError("Document", str(document_id))
        return document

    async def get_for_editor(
        self, document_id: DocumentId, account_id: AccountId
    ) -> Document:
        """Get a document the account may edit.

        Raises:
            NotFoundError: If the document is missing or not visible to the account
            ValidationError: If the account may read but not edit
        """
        document = await self.get_for_reader(document_id, account_id)
        if not await self.can_edit(document, account_id):
            logfire.warn(
                "Edit permission check failed",
                document_id=str(document_id),
                account_id=str(account_id),
            )
            raise ValidationError("Insufficient permission to edit this document")
        return document

    async def list_roster(self, document: Document) -> list[Collaborator]:
        """Collaborators by join time, with the creator first.

        The creator is listed as OWNER even without an explicit row.
        """
        collaborators = await self.collaborator_repository.find_by_document(document.id)
        if any(c.account_id == document.creator_id for c in collaborators):
            return [
                c.model_copy(update={"is_creator": c.account_id == document.creator_id})
                for c in collaborators
            ]

        creator = Collaborator(
            id=CollaboratorId(uuid4()),
            document_id=document.id,
            account_id=document.creator_id,
            role=CollaboratorRole.OWNER,
            can_edit=True,
            can_invite=True,
            can_delete=True,
            joined_at=document.created_at,
            is_creator=True,
        )
        return [creator, *collaborators]
