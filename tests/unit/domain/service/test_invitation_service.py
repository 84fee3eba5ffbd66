"""Unit tests for InvitationService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from collab.domain.error import AlreadyCollaboratorError, DuplicateError
from collab.domain.model import utc_now
from collab.domain.repository import CollaboratorRepository, InvitationRepository
from collab.domain.service import InvitationService, ResolvedInvitee
from collab.domain.value import (
    AccountId,
    CollaboratorRole,
    DocumentId,
    InvitationStatus,
)
from tests.conftest import make_collaborator
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreateInvitation:
    """Tests for create_invitation."""

    @pytest.mark.asyncio
    async def test_creates_pending_invitation_with_expiry(self, unit_env):
        """New invitations are PENDING and expire after the configured days."""
        # Arrange
        invitation_service = await unit_env.get(InvitationService)
        document_id = DocumentId(uuid4())
        inviter_id = AccountId(uuid4())
        now = utc_now()

        # Act
        invitation = await invitation_service.create_invitation(
            document_id=document_id,
            inviter_id=inviter_id,
            invitee=ResolvedInvitee(email="new@uni.example"),
            orcid_id=None,
            role=CollaboratorRole.EDITOR,
            message="Join us",
            now=now,
        )

        # Assert
        assert invitation.status == InvitationStatus.PENDING
        assert invitation.role == CollaboratorRole.EDITOR
        assert invitation.email == "new@uni.example"
        assert invitation.expires_at - invitation.created_at == timedelta(days=30)
        assert len(invitation.token.root) >= 32

    @pytest.mark.asyncio
    async def test_tokens_are_unique(self, unit_env):
        """Every invitation gets its own token."""
        invitation_service = await unit_env.get(InvitationService)
        document_id = DocumentId(uuid4())
        inviter_id = AccountId(uuid4())

        first = await invitation_service.create_invitation(
            document_id, inviter_id, ResolvedInvitee(email="a@uni.example"), None
        )
        second = await invitation_service.create_invitation(
            document_id, inviter_id, ResolvedInvitee(email="b@uni.example"), None
        )

        assert first.token != second.token

    @pytest.mark.asyncio
    async def test_second_pending_for_same_email_is_duplicate(self, unit_env):
        """A pending invitation blocks another for the same email, any case."""
        invitation_service = await unit_env.get(InvitationService)
        document_id = DocumentId(uuid4())
        inviter_id = AccountId(uuid4())

        await invitation_service.create_invitation(
            document_id, inviter_id, ResolvedInvitee(email="Dup@Uni.example"), None
        )

        with pytest.raises(DuplicateError):
            await invitation_service.create_invitation(
                document_id, inviter_id, ResolvedInvitee(email="dup@uni.example"), None
            )

    @pytest.mark.asyncio
    async def test_same_identity_on_another_document_is_allowed(self, unit_env):
        """Deduplication is per document."""
        invitation_service = await unit_env.get(InvitationService)
        inviter_id = AccountId(uuid4())
        invitee = ResolvedInvitee(email="roaming@uni.example")

        await invitation_service.create_invitation(
            DocumentId(uuid4()), inviter_id, invitee, None
        )
        second = await invitation_service.create_invitation(
            DocumentId(uuid4()), inviter_id, invitee, None
        )

        assert second.status == InvitationStatus.PENDING

    @pytest.mark.asyncio
    async def test_existing_collaborator_is_rejected_before_duplicate_check(
        self, unit_env
    ):
        """Collaborators get AlreadyCollaboratorError even with a pending invite."""
        invitation_service = await unit_env.get(InvitationService)
        collaborator_repo = await unit_env.get(CollaboratorRepository)
        document_id = DocumentId(uuid4())
        inviter_id = AccountId(uuid4())
        account_id = AccountId(uuid4())
        invitee = ResolvedInvitee(account_id=account_id, matched=True)

        await invitation_service.create_invitation(
            document_id, inviter_id, invitee, None
        )
        await collaborator_repo.save(make_collaborator(document_id, account_id))

        with pytest.raises(AlreadyCollaboratorError):
            await invitation_service.create_invitation(
                document_id, inviter_id, invitee, None
            )

    @pytest.mark.asyncio
    async def test_lapsed_pending_invitation_does_not_block(self, unit_env):
        """An expired pending invitation is marked EXPIRED and a new one is made."""
        invitation_service = await unit_env.get(InvitationService)
        invitation_repo = await unit_env.get(InvitationRepository)
        document_id = DocumentId(uuid4())
        inviter_id = AccountId(uuid4())
        invitee = ResolvedInvitee(email="late@uni.example")
        long_ago = utc_now() - timedelta(days=45)

        old = await invitation_service.create_invitation(
            document_id, inviter_id, invitee, None, now=long_ago
        )
        new = await invitation_service.create_invitation(
            document_id, inviter_id, invitee, None
        )

        assert new.id != old.id
        stored_old = await invitation_repo.find_by_id(old.id)
        assert stored_old.status == InvitationStatus.EXPIRED

    @pytest.mark.asyncio
    async def test_pending_by_orcid_blocks_same_orcid(self, unit_env):
        """ORCID iD is an identity key for unresolved invitees."""
        invitation_service = await unit_env.get(InvitationService)
        document_id = DocumentId(uuid4())
        inviter_id = AccountId(uuid4())

        await invitation_service.create_invitation(
            document_id, inviter_id, ResolvedInvitee(), "0000-0002-1825-0097"
        )

        with pytest.raises(DuplicateError):
            await invitation_service.create_invitation(
                document_id, inviter_id, ResolvedInvitee(), "0000-0002-1825-0097"
            )


class TestListPending:
    """Tests for list_pending."""

    @pytest.mark.asyncio
    async def test_lapsed_invitations_are_left_out(self, unit_env):
        """Only live pending invitations are listed."""
        invitation_service = await unit_env.get(InvitationService)
        document_id = DocumentId(uuid4())
        inviter_id = AccountId(uuid4())

        await invitation_service.create_invitation(
            document_id,
            inviter_id,
            ResolvedInvitee(email="old@uni.example"),
            None,
            now=utc_now() - timedelta(days=31),
        )
        live = await invitation_service.create_invitation(
            document_id, inviter_id, ResolvedInvitee(email="fresh@uni.example"), None
        )

        pending = await invitation_service.list_pending(document_id)

        assert [i.id for i in pending] == [live.id]
