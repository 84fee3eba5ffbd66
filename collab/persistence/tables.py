"""SQLAlchemy table definitions for the collaboration core.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    func,
    text,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# ACCOUNTS TABLE (read-mostly, owned by the portal)
# ============================================================================
accounts_table = Table(
    "accounts",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("orcid_id", String(19), nullable=True),
    Column("email", String(255), nullable=True),
    Column("given_name", String(255), nullable=True),
    Column("family_name", String(255), nullable=True),
    Column("orcid_given_names", String(255), nullable=True),
    Column("orcid_family_name", String(255), nullable=True),
    Column("primary_institution", String(500), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_accounts_orcid_id", accounts_table.c.orcid_id, unique=True)
Index("idx_accounts_email_lower", func.lower(accounts_table.c.email))

# ============================================================================
# DOCUMENTS TABLE
# ============================================================================
documents_table = Table(
    "documents",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("title", String(500), nullable=False),
    Column("type", String(100), nullable=False, server_default="manuscript"),
    Column(
        "creator_id",
        UUID,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("content", Text, nullable=True),  # Live editor state
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_documents_creator_id", documents_table.c.creator_id)

# ============================================================================
# COLLABORATORS TABLE
# ============================================================================
collaborators_table = Table(
    "collaborators",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "document_id",
        UUID,
        ForeignKey("documents.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "account_id", UUID, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False
    ),
    Column("role", String(20), nullable=False),
    Column("can_edit", Boolean, nullable=False, server_default="true"),
    Column("can_invite", Boolean, nullable=False, server_default="false"),
    Column("can_delete", Boolean, nullable=False, server_default="false"),
    Column("invited_by", UUID, ForeignKey("accounts.id"), nullable=True),
    Column(
        "joined_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("document_id", "account_id", name="uq_collaborator_membership"),
)

Index("idx_collaborators_account_id", collaborators_table.c.account_id)

# ============================================================================
# INVITATIONS TABLE
# ============================================================================
invitations_table = Table(
    "invitations",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "document_id",
        UUID,
        ForeignKey("documents.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "inviter_id", UUID, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False
    ),
    Column("invited_account_id", UUID, ForeignKey("accounts.id"), nullable=True),
    Column("orcid_id", String(19), nullable=True),
    Column("email", String(255), nullable=True),
    Column("given_name", String(255), nullable=True),
    Column("family_name", String(255), nullable=True),
    Column("affiliation", String(500), nullable=True),
    Column("role", String(20), nullable=False),
    Column("status", String(20), nullable=False, server_default="PENDING"),
    Column("message", Text, nullable=True),
    Column("token", String(255), nullable=False, unique=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    Column("responded_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint(
        "status IN ('PENDING', 'ACCEPTED', 'DECLINED', 'EXPIRED')",
        name="ck_invitation_status",
    ),
)

Index(
    "idx_invitations_document_created",
    invitations_table.c.document_id,
    invitations_table.c.created_at.desc(),
)

# At most one PENDING invitation per identity key; the race-free half of dedup
Index(
    "uq_invitations_pending_account",
    invitations_table.c.document_id,
    invitations_table.c.invited_account_id,
    unique=True,
    postgresql_where=text("status = 'PENDING' AND invited_account_id IS NOT NULL"),
)
Index(
    "uq_invitations_pending_orcid",
    invitations_table.c.document_id,
    invitations_table.c.orcid_id,
    unique=True,
    postgresql_where=text("status = 'PENDING' AND orcid_id IS NOT NULL"),
)
Index(
    "uq_invitations_pending_email",
    invitations_table.c.document_id,
    func.lower(invitations_table.c.email),
    unique=True,
    postgresql_where=text("status = 'PENDING' AND email IS NOT NULL"),
)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "account_id", UUID, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "document_id",
        UUID,
        ForeignKey("documents.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("type", String(50), nullable=False),
    Column("title", String(255), nullable=False),
    Column("message", Text, nullable=False),
    Column("data", JSONB, nullable=False, server_default="{}"),
    Column("is_read", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_notifications_account_created",
    notifications_table.c.account_id,
    notifications_table.c.created_at.desc(),
)

# ============================================================================
# DOCUMENT VERSIONS TABLE (append-only)
# ============================================================================
document_versions_table = Table(
    "document_versions",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "document_id",
        UUID,
        ForeignKey("documents.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("version_number", Integer, nullable=False),
    Column("title", String(500), nullable=False),
    Column("content", Text, nullable=False),
    Column("description", Text, nullable=True),
    Column("version_type", String(20), nullable=False, server_default="MANUAL"),
    Column("word_count", Integer, nullable=False, server_default="0"),
    Column("creator_id", UUID, ForeignKey("accounts.id"), nullable=False),
    Column(
        "restored_from_version_id",
        UUID,
        ForeignKey("document_versions.id"),
        nullable=True,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("document_id", "version_number", name="uq_document_version_number"),
    CheckConstraint("version_number >= 1", name="ck_version_number_positive"),
)
