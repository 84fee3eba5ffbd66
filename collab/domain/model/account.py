"""Account entity.

Accounts live in the portal's directory. This core only reads them to
resolve invitees and to name inviters.
"""

from typing import Optional

from collab.domain.model.common import DomainModel
from collab.domain.value import AccountId


class Account(DomainModel):
    """Researcher account.

    ORCID iD and email are lookup keys. They are not guaranteed unique across
    historical data but are treated as unique for matching.
    """

    id: AccountId
    orcid_id: Optional[str] = None
    email: Optional[str] = None
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    # Profile fields imported from the ORCID record at sign-up
    orcid_given_names: Optional[str] = None
    orcid_family_name: Optional[str] = None
    primary_institution: Optional[str] = None

    @property
    def display_name(self) -> str:
        """Name shown to other researchers."""
        given = self.given_name or self.orcid_given_names or ""
        family = self.family_name or self.orcid_family_name or ""
        name = f"{given} {family}".strip()
        return name or self.email or "A colleague"
