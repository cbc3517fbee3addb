"""Column templates and the table template catalog."""

import logging
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict

from price_grid.models.table_state import TableType

logger = logging.getLogger(__name__)


class TableTemplate(BaseModel):
    """A draggable table archetype."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    type: TableType


TABLE_TEMPLATES: List[TableTemplate] = [
    TableTemplate(id="white-ticket", title="WHITE TICKET TABLE", type=TableType.WHITE_TICKET),
    TableTemplate(id="promo-planning", title="PROMOTION PLANNING TABLE", type=TableType.PROMOTION_PLANNING),
    TableTemplate(id="weekly-data", title="WEEKLY PRICE DATA TABLE", type=TableType.WEEKLY_DATA),
]

DEFAULT_COLUMNS: Dict[TableType, List[str]] = {
    TableType.WEEKLY_DATA: ["Week", "Sales $", "Units", "LY PPT", "AUR", "Price"],
    TableType.PROMOTION_PLANNING: ["Promo event", "Price", "Units", "Sales $", "AUR", "Notes"],
    TableType.WHITE_TICKET: ["White Ticket Price", "Ranking", "Units", "AUR", "Sales $", "IMU"],
}

# Metrics a column header can be switched to
AVAILABLE_METRICS: List[str] = [
    "Sales $",
    "Units",
    "LY PPT",
    "AUR",
    "Price",
    "IMU",
    "Ranking",
    "White Ticket Price",
    "Promo event",
    "Notes",
    "Week",
]


class ColumnTemplateResolver:
    """Maps table types to their default columns and templates to table types."""

    def __init__(self, templates: Optional[List[TableTemplate]] = None):
        self._templates = list(templates or TABLE_TEMPLATES)

    @staticmethod
    def default_columns(table_type: Union[TableType, str]) -> List[str]:
        """Return a fresh copy of the default columns for a table type.

        Unknown types yield an empty list so that placement still succeeds.
        """
        try:
            table_type = TableType(table_type)
        except ValueError:
            logger.warning(f"No column template for table type {table_type!r}")
            return []
        return list(DEFAULT_COLUMNS.get(table_type, []))

    def templates(self) -> List[TableTemplate]:
        return list(self._templates)

    def get_template(self, template_id: str) -> Optional[TableTemplate]:
        """Find a template by id, falling back to a match on its table type."""
        for template in self._templates:
            if template.id == template_id:
                return template
        for template in self._templates:
            if template.type.value == template_id:
                return template
        return None

    @staticmethod
    def available_metrics() -> List[str]:
        return list(AVAILABLE_METRICS)

    @staticmethod
    def is_known_metric(column: str) -> bool:
        return column in AVAILABLE_METRICS
