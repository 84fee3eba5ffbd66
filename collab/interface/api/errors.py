"""Translation of domain errors to HTTP responses."""

import logfire
from fastapi import HTTPException, status

from collab.domain.error import (
    AlreadyCollaboratorError,
    DomainError,
    DuplicateError,
    LookupFailedError,
    NotFoundError,
    ValidationError,
    VersionConflictError,
)
from collab.domain.service import JWTService
from collab.util.jwt import JWTError


def authenticate(jwt_service: JWTService, auth_token: str | None) -> str:
    """Return the account ID from the session cookie.

    Raises:
        HTTPException: 401 if the token is missing or invalid
    """
    if not auth_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        return jwt_service.verify_token(auth_token).account_id
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )


def to_http_error(error: DomainError) -> HTTPException:
    """Map a domain error to an HTTP error with a distinct detail per kind."""
    if isinstance(error, DuplicateError):
        return HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Invitation already sent to this researcher",
        )
    if isinstance(error, AlreadyCollaboratorError):
        return HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="This researcher is already a collaborator",
        )
    if isinstance(error, VersionConflictError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, LookupFailedError):
        logfire.error("Identity lookup unavailable", error=str(error))
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Researcher lookup is temporarily unavailable",
        )
    if isinstance(error, ValidationError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))

    logfire.error("Unmapped domain error", error=str(error))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
