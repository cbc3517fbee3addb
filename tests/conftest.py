"""Shared pytest fixtures for the price grid tests."""

import pytest
from fastapi.testclient import TestClient

from price_grid.core.config import GridConfig
from price_grid.services.column_service import ColumnTemplateResolver
from price_grid.services.filter_service import FilterHierarchyResolver
from price_grid.services.grid_service import GridModel
from price_grid.services.layout_service import LayoutStore
from price_grid.services.table_state_service import TableStateManager


@pytest.fixture
def grid():
    """Create the default 6x2 grid."""
    return GridModel(GridConfig(row_count=6, col_count=2))


@pytest.fixture
def filter_resolver():
    """Create a filter resolver over the built-in hierarchy."""
    return FilterHierarchyResolver()


@pytest.fixture
def manager(grid, filter_resolver):
    """Create an empty table state manager."""
    return TableStateManager(
        grid=grid,
        columns=ColumnTemplateResolver(),
        filters=filter_resolver,
    )


@pytest.fixture
def full_manager(manager):
    """Create a manager with every cell of the grid occupied."""
    for row, col in manager.grid.cells():
        manager.place_template("white-ticket", row, col)
    return manager


@pytest.fixture
def store():
    """Create an empty layout store."""
    return LayoutStore()


@pytest.fixture
def client():
    """Create a test client with a fresh grid session."""
    from price_grid.main import app

    with TestClient(app) as test_client:
        yield test_client
