"""Service owning the live collection of tables placed on the grid."""

import logging
import uuid
from typing import Any, Dict, Iterable, List, Optional, Union

from price_grid.core.exceptions import (
    ColumnError,
    FilterError,
    GridFullError,
    GridOverlapError,
    TableNotFoundError,
    UnknownTemplateError,
)
from price_grid.models.table_state import FilterState, GridPosition, Table, TableType
from price_grid.services.column_service import ColumnTemplateResolver
from price_grid.services.filter_service import FilterHierarchyResolver
from price_grid.services.grid_service import GridModel

# Set up logging
logger = logging.getLogger(__name__)


class TableStateManager:
    """The only component allowed to create, displace or mutate tables.

    Every public operation either completes or raises before touching the
    collection, so a rejected call leaves the tables exactly as they were.
    """

    def __init__(
        self,
        grid: Optional[GridModel] = None,
        columns: Optional[ColumnTemplateResolver] = None,
        filters: Optional[FilterHierarchyResolver] = None,
    ):
        self.grid = grid or GridModel()
        self.columns = columns or ColumnTemplateResolver()
        self.filters = filters or FilterHierarchyResolver()
        self._tables: Dict[str, Table] = {}

    def __len__(self) -> int:
        return len(self._tables)

    def __contains__(self, table_id: object) -> bool:
        return table_id in self._tables

    # Queries

    def get_table(self, table_id: str) -> Table:
        """Get a live table by ID."""
        table = self._tables.get(table_id)
        if table is None:
            logger.warning(f"Table {table_id} not found")
            raise TableNotFoundError(f"Table with ID {table_id} not found")
        return table

    def list_tables(self) -> List[Table]:
        """List live tables in row-major position order."""
        return sorted(
            self._tables.values(),
            key=lambda t: (t.position.row, t.position.col),
        )

    def snapshot(self) -> List[Table]:
        """Return deep copies of the live tables."""
        return [table.model_copy(deep=True) for table in self.list_tables()]

    # Placement

    def place_template(self, template_id: str, row: int, col: int) -> Table:
        """Drop a template on a cell, displacing any occupant.

        Args:
            template_id: The dragged template's ID.
            row: Target row.
            col: Target column.

        Returns:
            Table: The newly created table.

        Raises:
            GridBoundsError: If the target cell is outside the grid.
            UnknownTemplateError: If the template ID is not recognised.
            GridFullError: If the occupant has nowhere to go. Nothing is changed.
        """
        self.grid.check_bounds(row, col)

        template = self.columns.get_template(template_id)
        if template is None:
            logger.warning(f"Drop rejected: unknown template {template_id}")
            raise UnknownTemplateError(f"Unknown table template {template_id}")

        occupant = self._occupant(row, col)
        relocation: Optional[GridPosition] = None
        if occupant is not None:
            try:
                relocation = self.grid.next_free_cell(self._tables.values(), exclude=(row, col))
            except GridFullError:
                logger.warning(
                    f"Drop of {template_id} at ({row}, {col}) rejected: "
                    f"no free cell for occupant {occupant.id}"
                )
                raise

        table = Table(
            id=self._new_table_id(template.id),
            type=template.type,
            position=GridPosition(row=row, col=col, width=1),
            filters=FilterState(),
            columns=self.columns.default_columns(template.type),
            data=[],
        )

        # Commit
        if occupant is not None and relocation is not None:
            logger.info(
                f"Displaced table {occupant.id} from ({row}, {col}) "
                f"to ({relocation.row}, {relocation.col})"
            )
            occupant.position = relocation
        self._tables[table.id] = table
        logger.info(f"Placed table {table.id} ({table.type.value}) at ({row}, {col})")

        return table

    def remove_table(self, table_id: str) -> Table:
        """Remove a table and free its cell."""
        table = self.get_table(table_id)
        del self._tables[table_id]
        logger.info(
            f"Removed table {table_id} from ({table.position.row}, {table.position.col})"
        )
        return table

    def restore(self, tables: Iterable[Table]) -> List[Table]:
        """Replace the whole collection, e.g. when a saved layout is loaded.

        Raises:
            GridOverlapError: If the incoming tables overlap or leave the grid.
        """
        incoming = [table.model_copy(deep=True) for table in tables]
        self.grid.check_no_overlap(incoming)

        ids = [table.id for table in incoming]
        if len(set(ids)) != len(ids):
            raise GridOverlapError("Restored tables contain duplicate IDs")

        self._tables = {table.id: table for table in incoming}
        logger.info(f"Restored {len(incoming)} tables")
        return self.list_tables()

    def clear(self) -> None:
        self._tables = {}
        logger.info("Cleared all tables")

    # Mutation

    def change_type(self, table_id: str, new_type: Union[TableType, str]) -> Table:
        """Change a table's type. Columns and filters are kept as they are."""
        table = self.get_table(table_id)
        try:
            table_type = TableType(new_type)
        except ValueError:
            logger.warning(f"Type change rejected for table {table_id}: unknown type {new_type}")
            raise UnknownTemplateError(f"Unknown table type {new_type}")
        table.type = table_type
        logger.info(f"Changed type of table {table_id} to {table_type.value}")
        return table

    def apply_filters(self, table_id: str, filters: FilterState) -> Table:
        """Validate and commit a complete filter state.

        Raises:
            FilterError: If the filters break the cascade rule or hold invalid values.
        """
        table = self.get_table(table_id)
        try:
            self.filters.validate(filters)
        except FilterError as e:
            logger.warning(f"Filters rejected for table {table_id}: {e}")
            raise

        table.filters = filters.model_copy(deep=True)
        logger.info(f"Applied filters to table {table_id}")
        return table

    def update_filter(self, table_id: str, field_name: str, value: Any) -> Table:
        """Change one filter field, clearing its descendants, then validate and commit."""
        table = self.get_table(table_id)
        candidate = self.filters.set_field(table.filters, field_name, value)
        return self.apply_filters(table_id, candidate)

    def replace_column(self, table_id: str, index: int, column: str) -> Table:
        """Swap the column at ``index`` for another metric."""
        table = self.get_table(table_id)
        if not 0 <= index < len(table.columns):
            raise ColumnError(
                f"Column index {index} is out of range for table {table_id}"
            )

        columns = list(table.columns)
        columns[index] = column
        self._check_columns(table_id, columns)

        table.columns = columns
        logger.info(f"Replaced column {index} of table {table_id} with {column}")
        return table

    def set_columns(self, table_id: str, columns: List[str]) -> Table:
        """Replace a table's ordered column list."""
        table = self.get_table(table_id)
        columns = list(columns)
        self._check_columns(table_id, columns)

        table.columns = columns
        logger.info(f"Set {len(columns)} columns on table {table_id}")
        return table

    def set_data(self, table_id: str, data: Any) -> Table:
        """Store the opaque data payload for a table."""
        table = self.get_table(table_id)
        table.data = data
        return table

    # Helpers

    def _occupant(self, row: int, col: int) -> Optional[Table]:
        for table in self._tables.values():
            if table.position.row == row and table.position.col == col:
                return table
        return None

    def _check_columns(self, table_id: str, columns: List[str]) -> None:
        unknown = [c for c in columns if not self.columns.is_known_metric(c)]
        if unknown:
            logger.warning(f"Column change rejected for table {table_id}: unknown {unknown}")
            raise ColumnError(f"Unknown column(s): {', '.join(unknown)}")
        if len(set(columns)) != len(columns):
            logger.warning(f"Column change rejected for table {table_id}: duplicates")
            raise ColumnError("A column can appear only once in a table")

    def _new_table_id(self, template_id: str) -> str:
        table_id = f"{template_id}-{uuid.uuid4().hex[:12]}"
        while table_id in self._tables:
            table_id = f"{template_id}-{uuid.uuid4().hex[:12]}"
        return table_id
