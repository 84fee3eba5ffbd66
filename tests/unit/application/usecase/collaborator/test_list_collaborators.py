"""Unit tests for ListCollaboratorsUseCase."""

from datetime import timedelta
from uuid import uuid4

import pytest

from collab.application.usecase.collaborator import (
    ListCollaboratorsRequest,
    ListCollaboratorsUseCase,
)
from collab.domain.model import utc_now
from collab.domain.repository import (
    AccountRepository,
    CollaboratorRepository,
    DocumentRepository,
)
from collab.domain.service import InvitationService, ResolvedInvitee
from collab.domain.value import CollaboratorRole
from tests.conftest import make_account, make_collaborator, make_document
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListCollaboratorsUseCase:
    """Tests for ListCollaboratorsUseCase."""

    @pytest.mark.asyncio
    async def test_roster_with_creator_collaborators_and_live_invitations(
        self, unit_env
    ):
        # Arrange
        account_repo = await unit_env.get(AccountRepository)
        document_repo = await unit_env.get(DocumentRepository)
        collaborator_repo = await unit_env.get(CollaboratorRepository)
        invitation_service = await unit_env.get(InvitationService)
        use_case = await unit_env.get(ListCollaboratorsUseCase)

        creator = await account_repo.save(
            make_account(given_name="Barbara", family_name="McClintock")
        )
        editor = await account_repo.save(
            make_account(
                email="editor@uni.example",
                orcid_id="0000-0002-1825-0097",
                given_name="Nettie",
                family_name="Stevens",
                primary_institution="Bryn Mawr",
            )
        )
        document = await document_repo.save(make_document(creator.id))
        await collaborator_repo.save(
            make_collaborator(document.id, editor.id, CollaboratorRole.EDITOR)
        )

        live = await invitation_service.create_invitation(
            document.id, creator.id, ResolvedInvitee(email="soon@uni.example"), None
        )
        await invitation_service.create_invitation(
            document.id,
            creator.id,
            ResolvedInvitee(email="lapsed@uni.example"),
            None,
            now=utc_now() - timedelta(days=60),
        )

        # Act
        response = await use_case.execute(
            ListCollaboratorsRequest(
                document_id=str(document.id), requester_id=str(editor.id)
            )
        )

        # Assert
        owner, member = response.collaborators
        assert owner.account_id == str(creator.id)
        assert owner.name == "Barbara McClintock"
        assert owner.role == CollaboratorRole.OWNER
        assert owner.is_creator is True

        assert member.name == "Nettie Stevens"
        assert member.email == "editor@uni.example"
        assert member.orcid_id == "0000-0002-1825-0097"
        assert member.affiliation == "Bryn Mawr"
        assert member.role == CollaboratorRole.EDITOR
        assert member.is_creator is False

        assert [i.invitation_id for i in response.pending_invitations] == [str(live.id)]
