"""API for the Price Grid."""

from fastapi import APIRouter

from price_grid.api.v1.endpoints import catalog, layout, table_state

api_router = APIRouter()
api_router.include_router(catalog.router, prefix="/catalog", tags=["catalog"])
api_router.include_router(
    table_state.router, prefix="/tables", tags=["tables"]
)
api_router.include_router(
    layout.router, prefix="/layouts", tags=["layouts"]
)
