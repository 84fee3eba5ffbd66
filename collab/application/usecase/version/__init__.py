"""Version use cases."""

from collab.application.usecase.version.create_version import (
    CreateVersionRequest,
    CreateVersionResponse,
    CreateVersionUseCase,
)
from collab.application.usecase.version.get_version import (
    GetVersionRequest,
    GetVersionResponse,
    GetVersionUseCase,
)
from collab.application.usecase.version.items import VersionDetail, VersionSummary
from collab.application.usecase.version.list_versions import (
    ListVersionsRequest,
    ListVersionsResponse,
    ListVersionsUseCase,
)
from collab.application.usecase.version.restore_version import (
    RestoreVersionRequest,
    RestoreVersionResponse,
    RestoreVersionUseCase,
)

__all__ = [
    "CreateVersionRequest",
    "CreateVersionResponse",
    "CreateVersionUseCase",
    "GetVersionRequest",
    "GetVersionResponse",
    "GetVersionUseCase",
    "ListVersionsRequest",
    "ListVersionsResponse",
    "ListVersionsUseCase",
    "RestoreVersionRequest",
    "RestoreVersionResponse",
    "RestoreVersionUseCase",
    "VersionDetail",
    "VersionSummary",
]
