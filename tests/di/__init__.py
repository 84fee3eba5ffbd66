"""Mock providers for testing."""

from .mail import MockMailProvider
from .orcid import MockOrcidProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockMailProvider",
    "MockOrcidProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
