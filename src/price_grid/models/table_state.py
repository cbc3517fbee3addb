"""Table state models for the tables placed on the grid."""

from datetime import date
from enum import Enum
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TableType(str, Enum):
    """The three table archetypes a template can produce."""

    WEEKLY_DATA = "weekly-data"
    PROMOTION_PLANNING = "promotion-planning"
    WHITE_TICKET = "white-ticket"


class GridPosition(BaseModel):
    """Cell a table occupies. A width of 2 spans the whole row when rendered."""

    row: int = Field(ge=0)
    col: int = Field(ge=0)
    width: Literal[1, 2] = 1

    @property
    def cell(self) -> tuple:
        return (self.row, self.col)


class FilterState(BaseModel):
    """Per-table filter selections.

    Hierarchy fields cascade dept -> class -> subClass -> style. The time
    period and date fields only mean something on weekly data tables.
    """

    model_config = ConfigDict(populate_by_name=True)

    dept: str = ""
    class_: str = Field(default="", alias="class")
    sub_class: str = Field(default="", alias="subClass")
    style: str = ""
    time_period: str = Field(default="", alias="timePeriod")
    start_date: Optional[date] = Field(default=None, alias="startDate")
    end_date: Optional[date] = Field(default=None, alias="endDate")

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _empty_date_is_none(cls, value: Any) -> Any:
        # Date inputs post an empty string when cleared
        if value == "":
            return None
        return value

    @field_validator("dept", "class_", "sub_class", "style", "time_period", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        if value is None:
            return ""
        return value

    def is_empty(self) -> bool:
        return self == FilterState()


class Table(BaseModel):
    """A table placed on the grid."""

    id: str
    type: TableType
    position: GridPosition
    filters: FilterState = Field(default_factory=FilterState)
    columns: List[str] = Field(default_factory=list)
    data: Any = Field(default_factory=list)  # Opaque payload from the data collaborator

    model_config = ConfigDict(populate_by_name=True)
