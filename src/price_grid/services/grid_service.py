"""Service answering occupancy questions about the fixed table grid."""

import logging
from typing import Iterable, Iterator, Optional, Tuple

from price_grid.core.config import GridConfig
from price_grid.core.exceptions import GridBoundsError, GridFullError, GridOverlapError
from price_grid.models.table_state import GridPosition, Table

logger = logging.getLogger(__name__)


class GridModel:
    """Occupancy rules for a grid of ``row_count`` x ``col_count`` cells.

    The grid holds no tables itself; every query takes the current table
    collection so the Table State Manager stays the only owner of state.
    """

    def __init__(self, config: Optional[GridConfig] = None):
        config = config or GridConfig()
        self.row_count = config.row_count
        self.col_count = config.col_count

    @property
    def capacity(self) -> int:
        return self.row_count * self.col_count

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Yield every cell in row-major order."""
        for row in range(self.row_count):
            for col in range(self.col_count):
                yield row, col

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.row_count and 0 <= col < self.col_count

    def check_bounds(self, row: int, col: int) -> None:
        if not self.contains(row, col):
            raise GridBoundsError(row, col, self.row_count, self.col_count)

    @staticmethod
    def is_occupied(tables: Iterable[Table], row: int, col: int) -> bool:
        """Return True if some table sits at (row, col)."""
        return any(t.position.row == row and t.position.col == col for t in tables)

    def next_free_cell(
        self,
        tables: Iterable[Table],
        exclude: Optional[Tuple[int, int]] = None,
    ) -> GridPosition:
        """Return the first unoccupied cell in row-major order.

        Args:
            tables: The current table collection.
            exclude: A cell that must not be returned even if it is free.

        Returns:
            GridPosition: The free cell, always with width 1.

        Raises:
            GridFullError: If every cell is occupied.
        """
        occupied = {(t.position.row, t.position.col) for t in tables}
        for row, col in self.cells():
            if (row, col) == exclude or (row, col) in occupied:
                continue
            return GridPosition(row=row, col=col, width=1)

        raise GridFullError(f"All {self.capacity} grid cells are occupied")

    def check_no_overlap(self, tables: Iterable[Table]) -> None:
        """Raise GridOverlapError if two tables share a cell or one lies off the grid."""
        seen = {}
        for table in tables:
            cell = (table.position.row, table.position.col)
            if not self.contains(*cell):
                raise GridOverlapError(
                    f"Table {table.id} at {cell} lies outside the "
                    f"{self.row_count}x{self.col_count} grid"
                )
            if cell in seen:
                raise GridOverlapError(
                    f"Tables {seen[cell]} and {table.id} both occupy cell {cell}"
                )
            seen[cell] = table.id
