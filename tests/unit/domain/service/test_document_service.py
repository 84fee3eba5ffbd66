"""Unit tests for DocumentService."""

from uuid import uuid4

import pytest

from collab.domain.error import NotFoundError, ValidationError
from collab.domain.repository import CollaboratorRepository, DocumentRepository
from collab.domain.service import DocumentService
from collab.domain.value import AccountId, CollaboratorRole, DocumentId
from tests.conftest import make_collaborator, make_document
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestPermissions:
    """Tests for the access checks."""

    @pytest.mark.asyncio
    async def test_creator_may_invite_without_collaborator_row(self, unit_env):
        document_service = await unit_env.get(DocumentService)
        document_repo = await unit_env.get(DocumentRepository)
        creator_id = AccountId(uuid4())
        document = await document_repo.save(make_document(creator_id))

        result = await document_service.get_for_invite(document.id, creator_id)

        assert result.id == document.id

    @pytest.mark.asyncio
    async def test_contributor_may_not_invite(self, unit_env):
        document_service = await unit_env.get(DocumentService)
        document_repo = await unit_env.get(DocumentRepository)
        collaborator_repo = await unit_env.get(CollaboratorRepository)
        document = await document_repo.save(make_document(AccountId(uuid4())))
        member_id = AccountId(uuid4())
        await collaborator_repo.save(make_collaborator(document.id, member_id))

        with pytest.raises(ValidationError):
            await document_service.get_for_invite(document.id, member_id)

    @pytest.mark.asyncio
    async def test_admin_may_invite(self, unit_env):
        document_service = await unit_env.get(DocumentService)
        document_repo = await unit_env.get(DocumentRepository)
        collaborator_repo = await unit_env.get(CollaboratorRepository)
        document = await document_repo.save(make_document(AccountId(uuid4())))
        admin_id = AccountId(uuid4())
        await collaborator_repo.save(
            make_collaborator(document.id, admin_id, CollaboratorRole.ADMIN)
        )

        result = await document_service.get_for_invite(document.id, admin_id)

        assert result.id == document.id

    @pytest.mark.asyncio
    async def test_missing_document_reads_as_not_found(self, unit_env):
        document_service = await unit_env.get(DocumentService)

        with pytest.raises(NotFoundError):
            await document_service.get_for_reader(
                DocumentId(uuid4()), AccountId(uuid4())
            )

    @pytest.mark.asyncio
    async def test_stranger_cannot_read(self, unit_env):
        """Documents with no relationship to the caller look missing."""
        document_service = await unit_env.get(DocumentService)
        document_repo = await unit_env.get(DocumentRepository)
        document = await document_repo.save(make_document(AccountId(uuid4())))

        with pytest.raises(NotFoundError):
            await document_service.get_for_reader(document.id, AccountId(uuid4()))

    @pytest.mark.asyncio
    async def test_reviewer_may_read_but_not_edit(self, unit_env):
        document_service = await unit_env.get(DocumentService)
        document_repo = await unit_env.get(DocumentRepository)
        collaborator_repo = await unit_env.get(CollaboratorRepository)
        document = await document_repo.save(make_document(AccountId(uuid4())))
        reviewer_id = AccountId(uuid4())
        await collaborator_repo.save(
            make_collaborator(document.id, reviewer_id, CollaboratorRole.REVIEWER)
        )

        assert (await document_service.get_for_reader(document.id, reviewer_id)).id == (
            document.id
        )
        with pytest.raises(ValidationError):
            await document_service.get_for_editor(document.id, reviewer_id)


class TestListRoster:
    """Tests for list_roster."""

    @pytest.mark.asyncio
    async def test_creator_is_listed_first_as_owner(self, unit_env):
        """The creator appears as OWNER even without an explicit row."""
        document_service = await unit_env.get(DocumentService)
        collaborator_repo = await unit_env.get(CollaboratorRepository)
        creator_id = AccountId(uuid4())
        document = make_document(creator_id)
        member_id = AccountId(uuid4())
        await collaborator_repo.save(make_collaborator(document.id, member_id))

        roster = await document_service.list_roster(document)

        assert [c.account_id for c in roster] == [creator_id, member_id]
        assert roster[0].role == CollaboratorRole.OWNER
        assert roster[0].is_creator is True
        assert roster[1].is_creator is False

    @pytest.mark.asyncio
    async def test_explicit_creator_row_is_not_duplicated(self, unit_env):
        document_service = await unit_env.get(DocumentService)
        collaborator_repo = await unit_env.get(CollaboratorRepository)
        creator_id = AccountId(uuid4())
        document = make_document(creator_id)
        await collaborator_repo.save(
            make_collaborator(document.id, creator_id, CollaboratorRole.OWNER)
        )

        roster = await document_service.list_roster(document)

        assert len(roster) == 1
        assert roster[0].is_creator is True
