"""API endpoints for the tables placed on the grid."""

import logging

from fastapi import APIRouter, Depends, Path, status

from price_grid.core.dependencies import get_table_manager
from price_grid.models.table_state import FilterState, Table
from price_grid.schemas.table_state_api import (
    ColumnUpdate,
    ColumnsUpdate,
    FilterFieldUpdate,
    TableDataUpdate,
    TableListResponse,
    TablePlacementRequest,
    TableTypeUpdate,
)
from price_grid.services.table_state_service import TableStateManager

# Set up logging
logger = logging.getLogger(__name__)

# Create router
router = APIRouter()


@router.get(
    "",
    response_model=TableListResponse,
    status_code=status.HTTP_200_OK,
    summary="List the live tables",
    description="List the tables on the grid in row-major order.",
)
async def list_tables(
    manager: TableStateManager = Depends(get_table_manager),
) -> TableListResponse:
    """List the live tables."""
    return TableListResponse(items=manager.list_tables())


@router.post(
    "",
    response_model=Table,
    status_code=status.HTTP_201_CREATED,
    summary="Drop a template on a grid cell",
    description=(
        "Create a table from a template at the given cell. An existing "
        "occupant is moved to the next free cell; if there is none the drop "
        "is rejected and nothing changes."
    ),
)
async def place_table(
    placement: TablePlacementRequest,
    manager: TableStateManager = Depends(get_table_manager),
) -> Table:
    """Drop a template on a grid cell."""
    return manager.place_template(placement.template_id, placement.row, placement.col)


@router.get(
    "/{table_id}",
    response_model=Table,
    status_code=status.HTTP_200_OK,
    summary="Get a table by ID",
)
async def get_table(
    table_id: str = Path(..., description="The ID of the table to get"),
    manager: TableStateManager = Depends(get_table_manager),
) -> Table:
    """Get a table by ID."""
    return manager.get_table(table_id)


@router.delete(
    "/{table_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove a table by ID",
)
async def remove_table(
    table_id: str = Path(..., description="The ID of the table to remove"),
    manager: TableStateManager = Depends(get_table_manager),
) -> None:
    """Remove a table and free its cell."""
    manager.remove_table(table_id)


@router.put(
    "/{table_id}/type",
    response_model=Table,
    status_code=status.HTTP_200_OK,
    summary="Change a table's type",
    description="Change the table type. Columns and filters are left unchanged.",
)
async def change_table_type(
    update: TableTypeUpdate,
    table_id: str = Path(..., description="The ID of the table to update"),
    manager: TableStateManager = Depends(get_table_manager),
) -> Table:
    """Change a table's type."""
    return manager.change_type(table_id, update.type)


@router.put(
    "/{table_id}/filters",
    response_model=Table,
    status_code=status.HTTP_200_OK,
    summary="Apply a complete filter state",
)
async def apply_filters(
    filters: FilterState,
    table_id: str = Path(..., description="The ID of the table to filter"),
    manager: TableStateManager = Depends(get_table_manager),
) -> Table:
    """Validate and apply a complete filter state."""
    return manager.apply_filters(table_id, filters)


@router.patch(
    "/{table_id}/filters",
    response_model=Table,
    status_code=status.HTTP_200_OK,
    summary="Edit a single filter field",
    description="Changing a hierarchy field clears every field below it.",
)
async def update_filter(
    update: FilterFieldUpdate,
    table_id: str = Path(..., description="The ID of the table to filter"),
    manager: TableStateManager = Depends(get_table_manager),
) -> Table:
    """Edit a single filter field."""
    return manager.update_filter(table_id, update.field, update.value)


@router.put(
    "/{table_id}/columns",
    response_model=Table,
    status_code=status.HTTP_200_OK,
    summary="Replace a table's columns",
)
async def set_columns(
    update: ColumnsUpdate,
    table_id: str = Path(..., description="The ID of the table to update"),
    manager: TableStateManager = Depends(get_table_manager),
) -> Table:
    """Replace a table's ordered columns."""
    return manager.set_columns(table_id, update.columns)


@router.put(
    "/{table_id}/columns/{index}",
    response_model=Table,
    status_code=status.HTTP_200_OK,
    summary="Swap one column for another metric",
)
async def replace_column(
    update: ColumnUpdate,
    table_id: str = Path(..., description="The ID of the table to update"),
    index: int = Path(..., ge=0, description="Position of the column to swap"),
    manager: TableStateManager = Depends(get_table_manager),
) -> Table:
    """Swap one column for another metric."""
    return manager.replace_column(table_id, index, update.column)


@router.put(
    "/{table_id}/data",
    response_model=Table,
    status_code=status.HTTP_200_OK,
    summary="Store a table's data payload",
)
async def set_table_data(
    update: TableDataUpdate,
    table_id: str = Path(..., description="The ID of the table to update"),
    manager: TableStateManager = Depends(get_table_manager),
) -> Table:
    """Store the data payload supplied by the data service."""
    return manager.set_data(table_id, update.data)
