"""Identity resolution domain service.

Matches invite input (ORCID iD and/or email) to an existing account.
"""

import logfire
from sqlalchemy.exc import SQLAlchemyError

from collab.domain.error import LookupFailedError
from collab.domain.model import Account
from collab.domain.repository import AccountRepository
from collab.domain.value import AccountId
from collab.domain.value.common import ValueObject

from .base import Service


class OrcidClient:
    """ORCID public record client interface."""

    async def get_researcher_emails(self, orcid_id: str) -> list[str]:
        """Fetch the public email addresses on an ORCID record.

        Args:
            orcid_id: Bare ORCID iD

        Returns:
            Email addresses, primary first; empty when none are public

        Raises:
            LookupFailedError: If the ORCID service cannot be reached
        """
        raise NotImplementedError


class ResolvedInvitee(ValueObject):
    """Outcome of identity resolution."""

    account_id: AccountId | None = None
    email: str | None = None
    given_name: str | None = None
    family_name: str | None = None
    affiliation: str | None = None
    matched: bool = False


def first_non_empty(*values: str | None) -> str | None:
    """Return the first value that is neither None nor blank."""
    for value in values:
        if value is not None and value.strip():
            return value
    return None


class IdentityService(Service):
    """Domain service resolving invitees to existing accounts.

    ORCID matches win over email matches.
    """

    def __init__(
        self, account_repository: AccountRepository, orcid_client: OrcidClient
    ) -> None:
        """Initialize identity service.

        Args:
            account_repository: Account directory
            orcid_client: ORCID public record client
        """
        self.account_repository = account_repository
        self.orcid_client = orcid_client

    async def get_account(self, account_id: AccountId) -> Account | None:
        """Look up an account by ID.

        Raises:
            LookupFailedError: If the directory is unavailable
        """
        try:
            return await self.account_repository.find_by_id(account_id)
        except (SQLAlchemyError, OSError) as e:
            logfire.error(
                "Account lookup failed", account_id=str(account_id), error=str(e)
            )
            raise LookupFailedError(f"Account directory unavailable: {e}") from e

    async def resolve_invitee(
        self,
        orcid_id: str | None = None,
        email: str | None = None,
        given_name: str | None = None,
        family_name: str | None = None,
        affiliation: str | None = None,
    ) -> ResolvedInvitee:
        """Resolve invite input to an existing account.

        Profile fields on a match are taken from, in order: the value supplied
        by the caller, the stored profile, the ORCID-sourced profile.

        Args:
            orcid_id: Invitee ORCID iD
            email: Invitee email
            given_name: Caller-supplied given name
            family_name: Caller-supplied family name
            affiliation: Caller-supplied affiliation

        Returns:
            Resolution result; ``matched`` is False when no account was found

        Raises:
            LookupFailedError: If the directory or ORCID service is unavailable
        """
        with logfire.span(
            "identity_service.resolve_invitee",
            orcid_id=orcid_id,
            has_email=bool(email),
        ):
            if orcid_id:
                account = await self._lookup(
                    self.account_repository.find_by_orcid, orcid_id
                )
                if account:
                    logfire.info(
                        "Invitee matched by ORCID",
                        orcid_id=orcid_id,
                        account_id=str(account.id),
                    )
                    return self._from_account(
                        account,
                        first_non_empty(account.email, email),
                        given_name,
                        family_name,
                        affiliation,
                    )

                if not email:
                    email = await self._email_from_orcid(orcid_id)

            if email:
                account = await self._lookup(
                    self.account_repository.find_by_email, email
                )
                if account:
                    logfire.info(
                        "Invitee matched by email", account_id=str(account.id)
                    )
                    return self._from_account(
                        account, email, given_name, family_name, affiliation
                    )

            logfire.info("Invitee not matched to an account", orcid_id=orcid_id)
            return ResolvedInvitee(
                email=email,
                given_name=given_name,
                family_name=family_name,
                affiliation=affiliation,
                matched=False,
            )

    async def _lookup(self, finder, key: str) -> Account | None:
        try:
            return await finder(key)
        except (SQLAlchemyError, OSError) as e:
            logfire.error("Account directory lookup failed", error=str(e))
            raise LookupFailedError(f"Account directory unavailable: {e}") from e

    async def _email_from_orcid(self, orcid_id: str) -> str | None:
        """Adopt the first public email on the ORCID record, if any."""
        emails = await self.orcid_client.get_researcher_emails(orcid_id)

        if not emails:
            logfire.info("No public email on ORCID record", orcid_id=orcid_id)
            return None
        return emails[0]

    @staticmethod
    def _from_account(
        account: Account,
        email: str | None,
        given_name: str | None,
        family_name: str | None,
        affiliation: str | None,
    ) -> ResolvedInvitee:
        return ResolvedInvitee(
            account_id=account.id,
            email=email,
            given_name=first_non_empty(
                given_name, account.given_name, account.orcid_given_names
            ),
            family_name=first_non_empty(
                family_name, account.family_name, account.orcid_family_name
            ),
            affiliation=first_non_empty(affiliation, account.primary_institution),
            matched=True,
        )
