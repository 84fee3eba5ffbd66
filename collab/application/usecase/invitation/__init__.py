"""Invitation use cases."""

from collab.application.usecase.invitation.create_invitation import (
    CreateInvitationRequest,
    CreateInvitationResponse,
    CreateInvitationUseCase,
)
from collab.application.usecase.invitation.items import InvitationItem
from collab.application.usecase.invitation.list_invitations import (
    ListInvitationsRequest,
    ListInvitationsResponse,
    ListInvitationsUseCase,
)

__all__ = [
    "CreateInvitationRequest",
    "CreateInvitationResponse",
    "CreateInvitationUseCase",
    "InvitationItem",
    "ListInvitationsRequest",
    "ListInvitationsResponse",
    "ListInvitationsUseCase",
]
