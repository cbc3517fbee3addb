"""API schemas for table operations."""

from typing import Any, List, Optional

from pydantic import BaseModel, Field

from price_grid.models.table_state import Table, TableType


class TablePlacementRequest(BaseModel):
    """Schema for dropping a template on a grid cell."""

    template_id: str
    row: int = Field(ge=0)
    col: int = Field(ge=0)


class TableTypeUpdate(BaseModel):
    """Schema for changing a table's type."""

    type: TableType


class FilterFieldUpdate(BaseModel):
    """Schema for editing one filter field."""

    field: str
    value: Optional[Any] = None


class ColumnsUpdate(BaseModel):
    """Schema for replacing a table's columns."""

    columns: List[str]


class ColumnUpdate(BaseModel):
    """Schema for swapping a single column."""

    column: str


class TableDataUpdate(BaseModel):
    """Schema for the data collaborator's payload."""

    data: Any = None


class TableListResponse(BaseModel):
    """Schema for listing the live tables."""

    items: List[Table]
