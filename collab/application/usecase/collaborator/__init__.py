"""Collaborator use cases."""

from collab.application.usecase.collaborator.list_collaborators import (
    CollaboratorItem,
    ListCollaboratorsRequest,
    ListCollaboratorsResponse,
    ListCollaboratorsUseCase,
)

__all__ = [
    "CollaboratorItem",
    "ListCollaboratorsRequest",
    "ListCollaboratorsResponse",
    "ListCollaboratorsUseCase",
]
