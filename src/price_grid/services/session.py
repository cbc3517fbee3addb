"""One analyst session: the live tables, the saved layouts and the resolvers they use."""

import logging
from typing import List, Optional

from price_grid.core.config import Settings, get_settings
from price_grid.models.layout import SavedLayout
from price_grid.models.product_hierarchy import DEFAULT_PRODUCT_HIERARCHY, ProductHierarchy
from price_grid.models.table_state import Table
from price_grid.services.column_service import ColumnTemplateResolver
from price_grid.services.filter_service import FilterHierarchyResolver
from price_grid.services.grid_service import GridModel
from price_grid.services.layout_service import LayoutStore
from price_grid.services.table_state_service import TableStateManager

logger = logging.getLogger(__name__)


class GridSession:
    """Wires the grid services together for a single session."""

    def __init__(self, settings: Optional[Settings] = None):
        settings = settings or get_settings()

        self.grid = GridModel(settings.grid)
        self.column_resolver = ColumnTemplateResolver()
        self.filter_resolver = FilterHierarchyResolver(self._load_hierarchy(settings))
        self.tables = TableStateManager(
            grid=self.grid,
            columns=self.column_resolver,
            filters=self.filter_resolver,
        )
        self.layouts = LayoutStore()

        logger.info(
            f"Started grid session ({self.grid.row_count}x{self.grid.col_count} grid)"
        )

    @staticmethod
    def _load_hierarchy(settings: Settings) -> ProductHierarchy:
        if not settings.product_hierarchy_path:
            return DEFAULT_PRODUCT_HIERARCHY
        return ProductHierarchy.from_json_file(settings.product_hierarchy_path)

    def save_layout(self, name: str) -> SavedLayout:
        """Save the current tables under ``name``."""
        return self.layouts.save(name, self.tables.snapshot())

    def load_layout(self, name: str) -> List[Table]:
        """Replace the live tables with the layout saved under ``name``."""
        return self.tables.restore(self.layouts.load(name))

    def reset(self) -> None:
        """Empty the live tables and the saved layouts."""
        self.tables.clear()
        self.layouts.clear()
        logger.info("Session reset")
