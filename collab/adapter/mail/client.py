"""Mail relay client.

The relay owns templates and delivery. We POST the invitation data and
report whether it was accepted.
"""

import httpx
import logfire

from collab.domain.service.mail_service import (
    CollaborationInviteMail,
    MailClient,
    MailResult,
)


class HttpMailClient(MailClient):
    """Mail relay client over a shared ``httpx.AsyncClient``."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        relay_url: str,
        api_key: str | None = None,
        frontend_url: str | None = None,
        timeout_seconds: float = 10.0,
    ) -> None:
        """Initialize mail client.

        Args:
            http_client: Shared HTTP client, owned by the DI container
            relay_url: Endpoint accepting invitation messages
            api_key: Optional bearer token for the relay
            frontend_url: Portal URL the relay uses to build accept links
            timeout_seconds: Per-request timeout
        """
        self.http_client = http_client
        self.relay_url = relay_url
        self.api_key = api_key
        self.frontend_url = frontend_url
        self.timeout_seconds = timeout_seconds

    async def send_collaboration_invite(self, mail: CollaborationInviteMail) -> MailResult:
        payload = {
            "template": "collaboration-invitation",
            "to": mail.invitee_email,
            "data": {
                "invitee_name": mail.invitee_name,
                "inviter_name": mail.inviter_name,
                "document_title": mail.document_title,
                "role": mail.role.value,
                "message": mail.message,
                "invitation_token": mail.invitation_token,
                "kind": mail.kind.value,
                "app_url": self.frontend_url,
            },
        }
        headers = {"Authorization": f"Bearer {self.api_key}"} if self.api_key else {}

        try:
            response = await self.http_client.post(
                self.relay_url,
                json=payload,
                headers=headers,
                timeout=self.timeout_seconds,
            )
        except httpx.HTTPError as e:
            logfire.error("Mail relay HTTP error", error=str(e))
            return MailResult(success=False, error=f"Mail relay unreachable: {e}")

        if response.status_code >= 400:
            logfire.error(
                "Mail relay rejected message",
                status_code=response.status_code,
                error=response.text,
            )
            return MailResult(
                success=False, error=f"Mail relay returned {response.status_code}"
            )

        return MailResult(success=True)


class MockMailClient(MailClient):
    """Mock mail client for testing.

    Records messages instead of sending them. Set ``fail`` to simulate an
    unreachable relay.
    """

    def __init__(self) -> None:
        self.sent: list[CollaborationInviteMail] = []
        self.fail = False

    async def send_collaboration_invite(self, mail: CollaborationInviteMail) -> MailResult:
        if self.fail:
            return MailResult(success=False, error="Mail relay unreachable")
        self.sent.append(mail)
        return MailResult(success=True)
