"""Shared base for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable pydantic model; entities change only by being replaced or deleted."""

    model_config = ConfigDict(frozen=True)
