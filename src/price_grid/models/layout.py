"""Saved layout model for named grid arrangements."""

from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, Field

from price_grid.models.table_state import Table


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SavedLayout(BaseModel):
    """Model for a named snapshot of the table collection."""

    name: str = Field(min_length=1)
    snapshot: List[Table] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=_utcnow)
