"""Unit tests for CreateInvitationUseCase."""

import asyncio
from uuid import uuid4

import pytest

from collab.application.usecase.invitation import (
    CreateInvitationRequest,
    CreateInvitationUseCase,
)
from collab.domain.error import (
    AlreadyCollaboratorError,
    DuplicateError,
    LookupFailedError,
    ValidationError,
)
from collab.domain.repository import (
    AccountRepository,
    CollaboratorRepository,
    DocumentRepository,
    InvitationRepository,
    NotificationRepository,
    UnitOfWork,
)
from collab.domain.service import MailClient, OrcidClient
from collab.domain.value import (
    AccountId,
    CollaboratorRole,
    InvitationOutcome,
    InvitationStatus,
)
from tests.conftest import make_account, make_collaborator, make_document
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateInvitationUseCase:
    """Tests for CreateInvitationUseCase."""

    async def _setup(self, unit_env, document_type: str = "research_article"):
        """Seed an inviter and a document they created."""
        account_repo = await unit_env.get(AccountRepository)
        document_repo = await unit_env.get(DocumentRepository)

        inviter = await account_repo.save(
            make_account(
                orcid_id="0000-0001-0000-0001",
                email="owner@uni.example",
                given_name="Dorothy",
                family_name="Hodgkin",
            )
        )
        document = await document_repo.save(
            make_document(inviter.id, title="Insulin Structure", type=document_type)
        )
        use_case = await unit_env.get(CreateInvitationUseCase)
        return inviter, document, use_case

    def _request(self, document, inviter, **fields) -> CreateInvitationRequest:
        return CreateInvitationRequest(
            document_id=str(document.id), inviter_id=str(inviter.id), **fields
        )

    @pytest.mark.asyncio
    async def test_existing_account_by_orcid_gets_notification_and_mail(self, unit_env):
        """Invitee with an account is notified in-app and mailed."""
        # Arrange
        inviter, document, use_case = await self._setup(unit_env)
        account_repo = await unit_env.get(AccountRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        mail_client = await unit_env.get(MailClient)
        invitee = await account_repo.save(
            make_account(
                orcid_id="0000-0002-1825-0097",
                email="x@y.example",
                given_name="Rosalind",
                family_name="Franklin",
            )
        )

        # Act
        response = await use_case.execute(
            self._request(document, inviter, orcid_id="0000-0002-1825-0097")
        )

        # Assert
        assert response.outcome == InvitationOutcome.RESOLVED_EXISTING_USER
        assert response.invitation.invited_account_id == str(invitee.id)
        assert response.invitation.email == "x@y.example"
        assert response.invitation.status == InvitationStatus.PENDING
        assert response.notification_sent is True
        assert response.mail_sent is True
        assert response.warnings == []
        assert response.message == (
            "Invitation sent! Rosalind Franklin will receive a notification "
            "when they log in."
        )

        [notification] = await notification_repo.find_by_account(invitee.id)
        assert notification.data["inviter_name"] == "Dorothy Hodgkin"
        assert notification.data["invitation_id"] == response.invitation.invitation_id

        [mail] = mail_client.sent
        assert mail.invitee_email == "x@y.example"
        assert mail.inviter_name == "Dorothy Hodgkin"
        assert mail.document_title == "Insulin Structure"

    @pytest.mark.asyncio
    async def test_unknown_email_gets_mail_only(self, unit_env):
        """No account: mail is sent, no notification is created."""
        inviter, document, use_case = await self._setup(unit_env)
        mail_client = await unit_env.get(MailClient)

        response = await use_case.execute(
            self._request(
                document, inviter, email="new@uni.example", role=CollaboratorRole.EDITOR
            )
        )

        assert response.outcome == InvitationOutcome.UNRESOLVED_WITH_EMAIL
        assert response.invitation.invited_account_id is None
        assert response.invitation.role == CollaboratorRole.EDITOR
        assert response.notification_sent is False
        assert response.mail_sent is True
        assert response.message == (
            "Invitation sent to new@uni.example. They will need to create an "
            "account to accept."
        )
        assert [m.invitee_email for m in mail_client.sent] == ["new@uni.example"]

    @pytest.mark.asyncio
    async def test_orcid_without_account_or_public_email(self, unit_env):
        """Invitation is still created; nothing is sent."""
        inviter, document, use_case = await self._setup(unit_env)
        mail_client = await unit_env.get(MailClient)

        response = await use_case.execute(
            self._request(document, inviter, orcid_id="0000-0003-0000-0003")
        )

        assert response.outcome == InvitationOutcome.UNRESOLVED_WITHOUT_EMAIL
        assert response.invitation.orcid_id == "0000-0003-0000-0003"
        assert response.invitation.email is None
        assert response.notification_sent is False
        assert response.mail_sent is False
        assert mail_client.sent == []

    @pytest.mark.asyncio
    async def test_orcid_public_email_is_used_for_mail(self, unit_env):
        inviter, document, use_case = await self._setup(unit_env)
        orcid_client = await unit_env.get(OrcidClient)
        mail_client = await unit_env.get(MailClient)
        orcid_client.emails["0000-0003-0000-0003"] = ["public@lab.example"]

        response = await use_case.execute(
            self._request(document, inviter, orcid_id="0000-0003-0000-0003")
        )

        assert response.outcome == InvitationOutcome.UNRESOLVED_WITH_EMAIL
        assert response.invitation.email == "public@lab.example"
        assert [m.invitee_email for m in mail_client.sent] == ["public@lab.example"]

    @pytest.mark.asyncio
    async def test_invitation_is_committed_before_side_effects(self, unit_env):
        inviter, document, use_case = await self._setup(unit_env)
        unit_of_work = await unit_env.get(UnitOfWork)

        await use_case.execute(self._request(document, inviter, email="a@b.example"))

        assert unit_of_work.commits == 1

    @pytest.mark.asyncio
    async def test_second_invite_to_same_orcid_is_duplicate(self, unit_env):
        """Re-inviting a pending invitee fails; the first invitation survives."""
        inviter, document, use_case = await self._setup(unit_env)
        invitation_repo = await unit_env.get(InvitationRepository)
        request = self._request(document, inviter, orcid_id="0000-0002-1825-0097")

        await use_case.execute(request)
        with pytest.raises(DuplicateError):
            await use_case.execute(request)

        invitations = await invitation_repo.find_by_document(document.id)
        assert len(invitations) == 1

    @pytest.mark.asyncio
    async def test_concurrent_invites_create_exactly_one(self, unit_env):
        """Two simultaneous requests for one invitee leave a single invitation."""
        inviter, document, use_case = await self._setup(unit_env)
        invitation_repo = await unit_env.get(InvitationRepository)
        request = self._request(document, inviter, email="race@uni.example")

        results = await asyncio.gather(
            use_case.execute(request),
            use_case.execute(request),
            return_exceptions=True,
        )

        failures = [r for r in results if isinstance(r, Exception)]
        assert len(failures) == 1
        assert isinstance(failures[0], DuplicateError)
        assert len(await invitation_repo.find_by_document(document.id)) == 1

    @pytest.mark.asyncio
    async def test_existing_collaborator_is_rejected(self, unit_env):
        inviter, document, use_case = await self._setup(unit_env)
        account_repo = await unit_env.get(AccountRepository)
        collaborator_repo = await unit_env.get(CollaboratorRepository)
        member = await account_repo.save(make_account(email="member@uni.example"))
        await collaborator_repo.save(make_collaborator(document.id, member.id))

        with pytest.raises(AlreadyCollaboratorError):
            await use_case.execute(
                self._request(document, inviter, email="member@uni.example")
            )

    @pytest.mark.asyncio
    async def test_document_creator_cannot_be_invited(self, unit_env):
        """The creator is the OWNER even without a collaborator row."""
        inviter, document, use_case = await self._setup(unit_env)
        invitation_repo = await unit_env.get(InvitationRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        mail_client = await unit_env.get(MailClient)

        with pytest.raises(AlreadyCollaboratorError):
            await use_case.execute(
                self._request(document, inviter, email="owner@uni.example")
            )

        assert await invitation_repo.find_by_document(document.id) == []
        assert await notification_repo.find_by_account(inviter.id) == []
        assert mail_client.sent == []

    @pytest.mark.asyncio
    async def test_admin_cannot_invite_the_creator_by_orcid(self, unit_env):
        inviter, document, use_case = await self._setup(unit_env)
        account_repo = await unit_env.get(AccountRepository)
        collaborator_repo = await unit_env.get(CollaboratorRepository)
        admin = await account_repo.save(make_account(email="admin@uni.example"))
        await collaborator_repo.save(
            make_collaborator(document.id, admin.id, CollaboratorRole.ADMIN)
        )

        with pytest.raises(AlreadyCollaboratorError):
            await use_case.execute(
                self._request(document, admin, orcid_id="0000-0001-0000-0001")
            )

    @pytest.mark.asyncio
    async def test_mail_failure_is_a_warning(self, unit_env):
        """The invitation stands when the mail relay fails."""
        inviter, document, use_case = await self._setup(unit_env)
        invitation_repo = await unit_env.get(InvitationRepository)
        mail_client = await unit_env.get(MailClient)
        mail_client.fail = True

        response = await use_case.execute(
            self._request(document, inviter, email="new@uni.example")
        )

        assert response.mail_sent is False
        assert len(response.warnings) == 1
        assert "email could not be sent" in response.warnings[0]
        assert len(await invitation_repo.find_by_document(document.id)) == 1

    @pytest.mark.asyncio
    async def test_notification_failure_is_a_warning(self, unit_env):
        """The invitation stands when the notification store fails."""
        inviter, document, use_case = await self._setup(unit_env)
        account_repo = await unit_env.get(AccountRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        invitation_repo = await unit_env.get(InvitationRepository)
        await account_repo.save(make_account(email="known@uni.example"))
        notification_repo.fail = True

        response = await use_case.execute(
            self._request(document, inviter, email="known@uni.example")
        )

        assert response.outcome == InvitationOutcome.RESOLVED_EXISTING_USER
        assert response.notification_sent is False
        assert response.mail_sent is True
        assert response.warnings == ["The invitee could not be notified in the app"]
        assert len(await invitation_repo.find_by_document(document.id)) == 1

    @pytest.mark.asyncio
    async def test_proposal_invitation_uses_proposal_wording(self, unit_env):
        inviter, document, use_case = await self._setup(
            unit_env, document_type="grant_proposal"
        )
        account_repo = await unit_env.get(AccountRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        invitee = await account_repo.save(make_account(email="known@uni.example"))

        await use_case.execute(self._request(document, inviter, email="known@uni.example"))

        [notification] = await notification_repo.find_by_account(invitee.id)
        assert notification.title == "Research Proposal Invitation"

    @pytest.mark.asyncio
    async def test_requires_orcid_or_email(self, unit_env):
        inviter, document, use_case = await self._setup(unit_env)

        with pytest.raises(ValidationError, match="ORCID iD or an email"):
            await use_case.execute(self._request(document, inviter, email="   "))

    @pytest.mark.asyncio
    async def test_rejects_malformed_email(self, unit_env):
        inviter, document, use_case = await self._setup(unit_env)

        with pytest.raises(ValidationError, match="Email address is not valid"):
            await use_case.execute(self._request(document, inviter, email="not-an-email"))

    @pytest.mark.asyncio
    async def test_orcid_url_form_is_normalised(self, unit_env):
        inviter, document, use_case = await self._setup(unit_env)
        account_repo = await unit_env.get(AccountRepository)
        invitee = await account_repo.save(
            make_account(orcid_id="0000-0002-9079-593X", email="ada@uni.example")
        )

        response = await use_case.execute(
            self._request(
                document, inviter, orcid_id=" https://orcid.org/0000-0002-9079-593x/ "
            )
        )

        assert response.invitation.orcid_id == "0000-0002-9079-593X"
        assert response.invitation.invited_account_id == str(invitee.id)

    @pytest.mark.asyncio
    async def test_rejects_malformed_orcid(self, unit_env):
        inviter, document, use_case = await self._setup(unit_env)

        with pytest.raises(ValidationError, match="ORCID iD is not valid"):
            await use_case.execute(
                self._request(document, inviter, orcid_id="https://orcid.org/me")
            )

    @pytest.mark.asyncio
    async def test_rejects_malformed_document_id(self, unit_env):
        inviter, _, use_case = await self._setup(unit_env)

        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateInvitationRequest(
                    document_id="abc", inviter_id=str(inviter.id), email="a@b.example"
                )
            )

    @pytest.mark.asyncio
    async def test_non_member_may_not_invite(self, unit_env):
        _, document, use_case = await self._setup(unit_env)

        with pytest.raises(ValidationError, match="insufficient permission"):
            await use_case.execute(
                CreateInvitationRequest(
                    document_id=str(document.id),
                    inviter_id=str(AccountId(uuid4())),
                    email="a@b.example",
                )
            )

    @pytest.mark.asyncio
    async def test_orcid_outage_fails_the_request(self, unit_env):
        inviter, document, use_case = await self._setup(unit_env)
        invitation_repo = await unit_env.get(InvitationRepository)
        orcid_client = await unit_env.get(OrcidClient)
        orcid_client.fail = True

        with pytest.raises(LookupFailedError):
            await use_case.execute(
                self._request(document, inviter, orcid_id="0000-0003-0000-0003")
            )
        assert await invitation_repo.find_by_document(document.id) == []
