"""initial_schema

Create the collaboration core schema:
- Accounts (read-mostly directory owned by the portal)
- Documents (manuscripts and grant proposals)
- Collaborators (one membership per document and account)
- Invitations (at most one PENDING per document and identity key)
- Notifications (in-app, JSON payload)
- Document versions (append-only, gapless numbering per document)

Revision ID: 3c1f9a2b7d40
Revises:
Create Date: 2026-10-19 10:12:44.318201

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f9a2b7d40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at(name: str = "created_at") -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # ACCOUNTS table
    # ========================================================================
    op.create_table(
        "accounts",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("orcid_id", sa.String(19), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("given_name", sa.String(255), nullable=True),
        sa.Column("family_name", sa.String(255), nullable=True),
        sa.Column("orcid_given_names", sa.String(255), nullable=True),
        sa.Column("orcid_family_name", sa.String(255), nullable=True),
        sa.Column("primary_institution", sa.String(500), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_accounts_orcid_id", "accounts", ["orcid_id"], unique=True)
    op.create_index(
        "idx_accounts_email_lower", "accounts", [sa.text("lower(email)")]
    )

    # ========================================================================
    # DOCUMENTS table
    # ========================================================================
    op.create_table(
        "documents",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("type", sa.String(100), nullable=False, server_default="manuscript"),
        sa.Column("creator_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=True),
        _created_at(),
        sa.ForeignKeyConstraint(["creator_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_documents_creator_id", "documents", ["creator_id"])

    # ========================================================================
    # COLLABORATORS table
    # ========================================================================
    op.create_table(
        "collaborators",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("document_id", sa.UUID(), nullable=False),
        sa.Column("account_id", sa.UUID(), nullable=False),
        sa.Column("role", sa.String(20), nullable=False),
        sa.Column("can_edit", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("can_invite", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("can_delete", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("invited_by", sa.UUID(), nullable=True),
        _created_at("joined_at"),
        sa.ForeignKeyConstraint(["document_id"], ["documents.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["account_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["invited_by"], ["accounts.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "document_id", "account_id", name="uq_collaborator_membership"
        ),
    )
    op.create_index("idx_collaborators_account_id", "collaborators", ["account_id"])

    # ========================================================================
    # INVITATIONS table
    # ========================================================================
    op.create_table(
        "invitations",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("document_id", sa.UUID(), nullable=False),
        sa.Column("inviter_id", sa.UUID(), nullable=False),
        sa.Column("invited_account_id", sa.UUID(), nullable=True),
        sa.Column("orcid_id", sa.String(19), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("given_name", sa.String(255), nullable=True),
        sa.Column("family_name", sa.String(255), nullable=True),
        sa.Column("affiliation", sa.String(500), nullable=True),
        sa.Column("role", sa.String(20), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="PENDING"),
        sa.Column("message", sa.Text(), nullable=True),
        sa.Column("token", sa.String(255), nullable=False),
        _created_at(),
        sa.Column("expires_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("responded_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["document_id"], ["documents.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["inviter_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["invited_account_id"], ["accounts.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("token", name="uq_invitations_token"),
        sa.CheckConstraint(
            "status IN ('PENDING', 'ACCEPTED', 'DECLINED', 'EXPIRED')",
            name="ck_invitation_status",
        ),
    )
    op.create_index(
        "idx_invitations_document_created",
        "invitations",
        ["document_id", sa.text("created_at DESC")],
    )

    # Partial unique indexes: one PENDING invitation per identity key
    op.create_index(
        "uq_invitations_pending_account",
        "invitations",
        ["document_id", "invited_account_id"],
        unique=True,
        postgresql_where=sa.text(
            "status = 'PENDING' AND invited_account_id IS NOT NULL"
        ),
    )
    op.create_index(
        "uq_invitations_pending_orcid",
        "invitations",
        ["document_id", "orcid_id"],
        unique=True,
        postgresql_where=sa.text("status = 'PENDING' AND orcid_id IS NOT NULL"),
    )
    op.create_index(
        "uq_invitations_pending_email",
        "invitations",
        ["document_id", sa.text("lower(email)")],
        unique=True,
        postgresql_where=sa.text("status = 'PENDING' AND email IS NOT NULL"),
    )

    # ========================================================================
    # NOTIFICATIONS table
    # ========================================================================
    op.create_table(
        "notifications",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("account_id", sa.UUID(), nullable=False),
        sa.Column("document_id", sa.UUID(), nullable=True),
        sa.Column("type", sa.String(50), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column(
            "data",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'{}'::jsonb"),
        ),
        sa.Column("is_read", sa.Boolean(), nullable=False, server_default="false"),
        _created_at(),
        sa.ForeignKeyConstraint(["account_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["document_id"], ["documents.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_notifications_account_created",
        "notifications",
        ["account_id", sa.text("created_at DESC")],
    )

    # ========================================================================
    # DOCUMENT_VERSIONS table (append-only)
    # ========================================================================
    op.create_table(
        "document_versions",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("document_id", sa.UUID(), nullable=False),
        sa.Column("version_number", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "version_type", sa.String(20), nullable=False, server_default="MANUAL"
        ),
        sa.Column("word_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("creator_id", sa.UUID(), nullable=False),
        sa.Column("restored_from_version_id", sa.UUID(), nullable=True),
        _created_at(),
        sa.ForeignKeyConstraint(["document_id"], ["documents.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["creator_id"], ["accounts.id"]),
        sa.ForeignKeyConstraint(
            ["restored_from_version_id"], ["document_versions.id"]
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "document_id", "version_number", name="uq_document_version_number"
        ),
        sa.CheckConstraint("version_number >= 1", name="ck_version_number_positive"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("document_versions")
    op.drop_table("notifications")
    op.drop_table("invitations")
    op.drop_table("collaborators")
    op.drop_table("documents")
    op.drop_table("accounts")
