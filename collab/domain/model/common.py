"""Base model for all domain entities."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are immutable; state changes go through ``model_copy``.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime.

    Timestamps are stored as ``timestamptz``; naive datetimes would not
    compare with values read back from the database.
    """
    return datetime.now(timezone.utc)
