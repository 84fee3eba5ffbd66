"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID

from collab.domain.error import ValidationError


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def parse_id(value: str, field: str) -> UUID:
    """Parse a UUID from request input.

    Raises:
        ValidationError: If the value is missing or not a UUID
    """
    if not value:
        raise ValidationError(f"{field} is required")
    try:
        return UUID(value)
    except ValueError:
        raise ValidationError(f"{field} is not a valid ID")
