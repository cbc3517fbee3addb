"""API schemas for saved layout operations."""

from datetime import datetime
from typing import List

from pydantic import BaseModel

from price_grid.models.layout import SavedLayout
from price_grid.models.table_state import Table


class LayoutCreate(BaseModel):
    """Schema for saving the current tables as a layout."""

    name: str


class LayoutSummary(BaseModel):
    """Schema for a layout entry in the saved layouts list."""

    name: str
    table_count: int
    created_at: datetime

    @classmethod
    def from_layout(cls, layout: SavedLayout) -> "LayoutSummary":
        return cls(
            name=layout.name,
            table_count=len(layout.snapshot),
            created_at=layout.created_at,
        )


class LayoutListResponse(BaseModel):
    """Schema for listing saved layouts."""

    items: List[LayoutSummary]


class LayoutLoadResponse(BaseModel):
    """Schema for the tables restored from a layout."""

    name: str
    items: List[Table]
