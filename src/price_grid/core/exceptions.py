"""Domain errors raised by the grid, table and layout services.

None of these is fatal: each one is surfaced to the interface layer, which
turns it into a user-facing message. A service that raises one of them has
left its state exactly as it was before the call.
"""

from typing import Optional


class PriceGridError(Exception):
    """Base class for all price grid errors."""


# Grid errors


class GridFullError(PriceGridError):
    """No free cell is left for a displaced table."""


class GridBoundsError(PriceGridError):
    """A cell lies outside the configured grid."""

    def __init__(self, row: int, col: int, row_count: int, col_count: int):
        self.row = row
        self.col = col
        super().__init__(
            f"Cell ({row}, {col}) is outside the {row_count}x{col_count} grid"
        )


class GridOverlapError(PriceGridError):
    """Two tables claim the same cell."""


# Filter errors


class FilterError(PriceGridError):
    """A filter state was rejected."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


class CascadeViolation(FilterError):
    """A child filter field is set without, or inconsistent with, its parent."""


class FilterValueError(FilterError):
    """A filter field holds a value outside its allowed options."""


class FilterRangeError(FilterError):
    """The start date falls after the end date."""


# Column errors


class ColumnError(PriceGridError):
    """A column edit would produce an invalid column set."""


# Layout errors


class DuplicateNameError(PriceGridError):
    """A layout with this name is already saved."""


class InvalidLayoutNameError(PriceGridError, ValueError):
    """Layout names must not be empty."""


# Lookup errors


class NotFoundError(PriceGridError):
    """The requested item does not exist."""


class LayoutNotFoundError(NotFoundError):
    """No layout is saved under this name."""


class TableNotFoundError(NotFoundError):
    """No live table has this id."""


class UnknownTemplateError(NotFoundError):
    """The template id names none of the fixed templates."""
