"""Mail infrastructure providers."""

import httpx
from dishka import Scope, provide

from collab.adapter.mail import HttpMailClient
from collab.config import Settings
from collab.domain.service import MailClient
from collab.util.di.base import ProviderBase


class MailProvider(ProviderBase):
    """Mail component base."""

    __mock_component__ = "mail"


class ProdMailProvider(MailProvider):
    """Production mail provider posting to the mail relay."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_mail_client(
        self, settings: Settings, http_client: httpx.AsyncClient
    ) -> MailClient:
        """Provide mail relay client."""
        return HttpMailClient(
            http_client=http_client,
            relay_url=settings.mail.relay_url,
            api_key=settings.mail.api_key,
            frontend_url=settings.api.frontend_url,
            timeout_seconds=settings.mail.timeout_seconds,
        )
