"""Mail relay adapter."""

from .client import HttpMailClient, MockMailClient

__all__ = ["HttpMailClient", "MockMailClient"]
