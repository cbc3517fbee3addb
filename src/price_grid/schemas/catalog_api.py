"""API schemas for the template catalog and hierarchy lookups."""

from typing import Dict, List

from pydantic import BaseModel

from price_grid.services.column_service import TableTemplate


class TemplateListResponse(BaseModel):
    items: List[TableTemplate]


class GridResponse(BaseModel):
    row_count: int
    col_count: int
    capacity: int


class ValuesResponse(BaseModel):
    values: List[str]


class TimePeriodsResponse(BaseModel):
    values: Dict[str, str]
