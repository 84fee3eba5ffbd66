"""Infrastructure providers."""

# Import bases
from .http import HttpClientProvider
from .mail import MailProvider
from .orcid import OrcidProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .mail import ProdMailProvider  # noqa: F401
from .orcid import ProdOrcidProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "HttpClientProvider",
    "MailProvider",
    "OrcidProvider",
    "PersistenceProvider",
    "ProdMailProvider",
    "ProdOrcidProvider",
    "ProdPersistenceProvider",
]
