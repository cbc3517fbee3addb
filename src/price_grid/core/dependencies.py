"""Dependencies for the application using FastAPI app state for singletons."""

import logging

from fastapi import Depends, Request

from price_grid.core.config import Settings, get_settings
from price_grid.services.layout_service import LayoutStore
from price_grid.services.session import GridSession
from price_grid.services.table_state_service import TableStateManager

logger = logging.getLogger(__name__)


def get_session(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> GridSession:
    """Get the grid session from application state."""
    if not hasattr(request.app.state, "session"):
        raise ValueError("Grid session not initialized in application state")

    return request.app.state.session


def get_table_manager(session: GridSession = Depends(get_session)) -> TableStateManager:
    """Get the table state manager of the current session."""
    return session.tables


def get_layout_store(session: GridSession = Depends(get_session)) -> LayoutStore:
    """Get the layout store of the current session."""
    return session.layouts
