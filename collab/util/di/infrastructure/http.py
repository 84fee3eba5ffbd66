"""Shared outbound HTTP client provider."""

from collections.abc import AsyncIterator

import httpx
import logfire
from dishka import Scope, provide

from collab.util.di.base import ProviderBase


class HttpClientProvider(ProviderBase):
    """One ``httpx.AsyncClient`` per container, closed at shutdown."""

    @provide(scope=Scope.APP)
    async def get_http_client(self) -> AsyncIterator[httpx.AsyncClient]:
        async with httpx.AsyncClient() as client:
            yield client
        logfire.info("HTTP client closed")
