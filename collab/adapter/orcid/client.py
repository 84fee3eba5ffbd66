"""ORCID public API client.

Only the public email endpoint is used, to find an address for researchers
who have not joined the portal yet.
"""

import httpx
import logfire

from collab.domain.error import LookupFailedError
from collab.domain.service.identity_service import OrcidClient


class RealOrcidClient(OrcidClient):
    """ORCID public API client over a shared ``httpx.AsyncClient``."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        api_base_url: str,
        timeout_seconds: float = 10.0,
    ) -> None:
        """Initialize ORCID client.

        Args:
            http_client: Shared HTTP client, owned by the DI container
            api_base_url: Public API base, e.g. https://pub.orcid.org/v3.0
            timeout_seconds: Per-request timeout
        """
        self.http_client = http_client
        self.api_base_url = api_base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds

    async def get_researcher_emails(self, orcid_id: str) -> list[str]:
        """Fetch public emails from an ORCID record.

        Args:
            orcid_id: ORCID iD

        Returns:
            Public email addresses, primary first. Empty if the record has
            none or does not exist.

        Raises:
            LookupFailedError: If the ORCID API cannot be reached or errors
        """
        url = f"{self.api_base_url}/{orcid_id}/email"
        try:
            response = await self.http_client.get(
                url,
                headers={"Accept": "application/json"},
                timeout=self.timeout_seconds,
            )
        except httpx.HTTPError as e:
            logfire.error("ORCID email lookup HTTP error", orcid_id=orcid_id, error=str(e))
            raise LookupFailedError(f"ORCID lookup failed for {orcid_id}") from e

        if response.status_code == 404:
            logfire.info("ORCID record not found", orcid_id=orcid_id)
            return []

        if response.status_code != 200:
            logfire.error(
                "ORCID email lookup failed",
                orcid_id=orcid_id,
                status_code=response.status_code,
            )
            raise LookupFailedError(
                f"ORCID lookup failed for {orcid_id}: {response.status_code}"
            )

        try:
            payload = response.json()
        except ValueError as e:
            logfire.error(
                "ORCID email lookup returned a non-JSON body",
                orcid_id=orcid_id,
                error=str(e),
            )
            raise LookupFailedError(f"ORCID lookup failed for {orcid_id}") from e

        entries = payload.get("email") if isinstance(payload, dict) else None
        if entries is None:
            return []
        if not isinstance(entries, list):
            logfire.error(
                "ORCID email lookup returned an unexpected shape",
                orcid_id=orcid_id,
            )
            raise LookupFailedError(f"ORCID lookup failed for {orcid_id}")

        entries = [e for e in entries if isinstance(e, dict)]
        # Primary address first
        entries = sorted(entries, key=lambda e: not e.get("primary", False))
        return [e["email"] for e in entries if e.get("email")]


class MockOrcidClient(OrcidClient):
    """Mock ORCID client for testing.

    Returns configured emails without making real API calls.
    """

    def __init__(self, emails: dict[str, list[str]] | None = None) -> None:
        self.emails: dict[str, list[str]] = emails or {}
        self.fail = False
        self.calls: list[str] = []

    async def get_researcher_emails(self, orcid_id: str) -> list[str]:
        self.calls.append(orcid_id)
        if self.fail:
            raise LookupFailedError(f"ORCID lookup failed for {orcid_id}")
        return list(self.emails.get(orcid_id, []))
