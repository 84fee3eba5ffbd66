"""Test configuration and shared builders."""

from uuid import uuid4

from collab.domain.model import Account, Collaborator, Document
from collab.domain.value import (
    AccountId,
    CollaboratorId,
    CollaboratorRole,
    DocumentId,
)


def make_account(
    orcid_id: str | None = None,
    email: str | None = None,
    given_name: str | None = None,
    family_name: str | None = None,
    **fields,
) -> Account:
    """Build an account with a fresh ID."""
    return Account(
        id=AccountId(uuid4()),
        orcid_id=orcid_id,
        email=email,
        given_name=given_name,
        family_name=family_name,
        **fields,
    )


def make_document(
    creator_id: AccountId,
    title: str = "Spin dynamics in layered magnets",
    type: str = "research_article",
    content: str | None = None,
) -> Document:
    """Build a document with a fresh ID."""
    return Document(
        id=DocumentId(uuid4()),
        title=title,
        type=type,
        creator_id=creator_id,
        content=content,
    )


def make_collaborator(
    document_id: DocumentId,
    account_id: AccountId,
    role: CollaboratorRole = CollaboratorRole.CONTRIBUTOR,
    can_edit: bool | None = None,
    can_invite: bool | None = None,
) -> Collaborator:
    """Build a collaborator; permissions default from the role."""
    return Collaborator(
        id=CollaboratorId(uuid4()),
        document_id=document_id,
        account_id=account_id,
        role=role,
        can_edit=role.can_edit if can_edit is None else can_edit,
        can_invite=role.can_invite if can_invite is None else can_invite,
    )
