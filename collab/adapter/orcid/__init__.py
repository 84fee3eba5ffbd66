"""ORCID public API adapter."""

from .client import MockOrcidClient, RealOrcidClient

__all__ = ["MockOrcidClient", "RealOrcidClient"]
