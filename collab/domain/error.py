"""Domain layer errors.

Each failure kind is its own class so callers can render distinct messages,
e.g. "already invited" versus "already a collaborator".
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Missing or malformed input, or insufficient permission."""

    pass


class DuplicateError(DomainError):
    """A pending invitation already exists for the resolved identity."""

    def __init__(self, document_id: str, identity: str):
        self.document_id = document_id
        self.identity = identity
        super().__init__(
            f"Invitation already sent to {identity} for document {document_id}"
        )


class AlreadyCollaboratorError(DomainError):
    """The invitee is already a collaborator on the document."""

    def __init__(self, document_id: str, account_id: str):
        self.document_id = document_id
        self.account_id = account_id
        super().__init__(
            f"Account {account_id} is already a collaborator on document {document_id}"
        )


class LookupFailedError(DomainError):
    """The identity directory or ORCID service could not be reached."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class VersionConflictError(DomainError):
    """Concurrent saves kept claiming the same version number."""

    pass
