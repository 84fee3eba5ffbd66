"""ORCID infrastructure providers."""

import httpx
from dishka import Scope, provide

from collab.adapter.orcid import RealOrcidClient
from collab.config import Settings
from collab.domain.service import OrcidClient
from collab.util.di.base import ProviderBase


class OrcidProvider(ProviderBase):
    """ORCID component base."""

    __mock_component__ = "orcid"


class ProdOrcidProvider(OrcidProvider):
    """Production ORCID provider using the public API."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_orcid_client(
        self, settings: Settings, http_client: httpx.AsyncClient
    ) -> OrcidClient:
        """Provide ORCID public API client."""
        return RealOrcidClient(
            http_client=http_client,
            api_base_url=settings.orcid.api_base_url,
            timeout_seconds=settings.orcid.timeout_seconds,
        )
