"""JWT token domain service."""

import logfire

from collab.config import AuthSettings
from collab.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for verifying the portal's session tokens."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, account_id: str) -> str:
        """Create JWT token for an account.

        Login lives in the portal; this is used by scripts and tests.
        """
        with logfire.span("jwt_service.create_token", account_id=account_id):
            return create_token(account_id, self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", account_id=payload.account_id)
                return payload
            except Exception as e:
                logfire.error("JWT token verification failed", error=str(e))
                raise
