"""API endpoints for saved layout operations."""

import logging

from fastapi import APIRouter, Depends, Path, status

from price_grid.core.dependencies import get_layout_store, get_session
from price_grid.models.layout import SavedLayout
from price_grid.schemas.layout_api import (
    LayoutCreate,
    LayoutListResponse,
    LayoutLoadResponse,
    LayoutSummary,
)
from price_grid.services.layout_service import LayoutStore
from price_grid.services.session import GridSession

# Set up logging
logger = logging.getLogger(__name__)

# Create router
router = APIRouter()


@router.post(
    "",
    response_model=LayoutSummary,
    status_code=status.HTTP_201_CREATED,
    summary="Save the current tables as a layout",
    description="Save a snapshot of the live tables under a new, unique name.",
)
async def save_layout(
    layout_create: LayoutCreate,
    session: GridSession = Depends(get_session),
) -> LayoutSummary:
    """Save the current tables as a layout."""
    layout = session.save_layout(layout_create.name)
    return LayoutSummary.from_layout(layout)


@router.get(
    "",
    response_model=LayoutListResponse,
    status_code=status.HTTP_200_OK,
    summary="List saved layouts",
    description="List saved layouts in the order they were saved.",
)
async def list_layouts(
    store: LayoutStore = Depends(get_layout_store),
) -> LayoutListResponse:
    """List saved layouts."""
    return LayoutListResponse(
        items=[LayoutSummary.from_layout(layout) for layout in store.list()]
    )


@router.get(
    "/{name}",
    response_model=SavedLayout,
    status_code=status.HTTP_200_OK,
    summary="Get a saved layout by name",
)
async def get_layout(
    name: str = Path(..., description="The name of the layout to get"),
    store: LayoutStore = Depends(get_layout_store),
) -> SavedLayout:
    """Get a saved layout by name."""
    return store.get(name)


@router.post(
    "/{name}/load",
    response_model=LayoutLoadResponse,
    status_code=status.HTTP_200_OK,
    summary="Load a saved layout",
    description="Replace the live tables with a copy of the saved layout.",
)
async def load_layout(
    name: str = Path(..., description="The name of the layout to load"),
    session: GridSession = Depends(get_session),
) -> LayoutLoadResponse:
    """Load a saved layout into the grid."""
    tables = session.load_layout(name)
    return LayoutLoadResponse(name=session.layouts.get(name).name, items=tables)


@router.delete(
    "/{name}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a saved layout by name",
)
async def delete_layout(
    name: str = Path(..., description="The name of the layout to delete"),
    store: LayoutStore = Depends(get_layout_store),
) -> None:
    """Delete a saved layout by name."""
    store.delete(name)
