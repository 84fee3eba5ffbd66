"""Unit tests for row mappers.

Rows come back from asyncpg with plain strings for enums and tokens; the
mappers must rebuild value objects and flatten them again on the way in.
"""

from datetime import timedelta
from uuid import uuid4

from collab.domain.model import DocumentVersion, Invitation, utc_now
from collab.domain.value import (
    AccountId,
    CollaboratorRole,
    DocumentId,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    VersionId,
    VersionType,
)
from collab.persistence.mappers import (
    collaborator_to_dict,
    invitation_to_dict,
    row_to_invitation,
    row_to_version,
    version_to_dict,
)
from tests.conftest import make_collaborator


class TestInvitationMapping:
    """Tests for invitation mapping."""

    def test_dict_holds_primitives(self):
        now = utc_now()
        invitation = Invitation(
            id=InvitationId(uuid4()),
            document_id=DocumentId(uuid4()),
            inviter_id=AccountId(uuid4()),
            email="a@b.example",
            role=CollaboratorRole.REVIEWER,
            token=InvitationToken("tok_123"),
            created_at=now,
            expires_at=now + timedelta(days=30),
        )

        data = invitation_to_dict(invitation)

        assert data["token"] == "tok_123"
        assert data["role"] == "REVIEWER"
        assert data["status"] == "PENDING"

    def test_row_rebuilds_value_objects(self):
        now = utc_now()
        row = {
            "id": str(uuid4()),
            "document_id": str(uuid4()),
            "inviter_id": str(uuid4()),
            "invited_account_id": None,
            "orcid_id": "0000-0002-1825-0097",
            "email": None,
            "role": "EDITOR",
            "status": "DECLINED",
            "token": "tok_456",
            "created_at": now,
            "expires_at": now + timedelta(days=30),
        }

        invitation = row_to_invitation(row)

        assert invitation.token == InvitationToken("tok_456")
        assert invitation.role == CollaboratorRole.EDITOR
        assert invitation.status == InvitationStatus.DECLINED
        assert invitation.invited_account_id is None


class TestVersionMapping:
    """Tests for version mapping."""

    def test_word_count_is_written_and_rederived(self):
        version = DocumentVersion(
            id=VersionId(uuid4()),
            document_id=DocumentId(uuid4()),
            version_number=4,
            title="Methods",
            content="<p>We sampled <b>forty</b> sites</p>",
            version_type=VersionType.RESTORE,
            creator_id=AccountId(uuid4()),
            restored_from_version_id=VersionId(uuid4()),
        )

        data = version_to_dict(version)
        assert data["word_count"] == 4
        assert data["version_type"] == "RESTORE"

        restored = row_to_version(data)
        assert restored == version


def test_collaborator_dict_drops_roster_flag():
    collaborator = make_collaborator(
        DocumentId(uuid4()), AccountId(uuid4()), CollaboratorRole.ADMIN
    ).model_copy(update={"is_creator": True})

    data = collaborator_to_dict(collaborator)

    assert "is_creator" not in data
    assert data["role"] == "ADMIN"
    assert data["can_invite"] is True
