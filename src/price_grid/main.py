"""Main module for the Price Grid API service."""

import logging
from typing import Any, Dict

from fastapi import Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from price_grid.api.v1.api import api_router
from price_grid.core.config import Settings, get_settings
from price_grid.core.exceptions import (
    ColumnError,
    DuplicateNameError,
    FilterError,
    GridBoundsError,
    GridFullError,
    GridOverlapError,
    InvalidLayoutNameError,
    NotFoundError,
    PriceGridError,
    UnknownTemplateError,
)
from price_grid.services.session import GridSession

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

settings = get_settings()

app = FastAPI(
    title=settings.project_name,
    openapi_url=f"{settings.api_v1_str}/openapi.json",
    redirect_slashes=False,  # Disable automatic redirects for trailing slashes
)

# Configure CORS with specific settings
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.backend_cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
    max_age=600,  # Cache preflight requests for 10 minutes
)

# Include the API router
app.include_router(api_router, prefix=settings.api_v1_str)

# Most specific first; the first matching class wins
ERROR_STATUS_CODES = [
    (UnknownTemplateError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (GridFullError, status.HTTP_409_CONFLICT),
    (DuplicateNameError, status.HTTP_409_CONFLICT),
    (GridOverlapError, status.HTTP_409_CONFLICT),
    (GridBoundsError, status.HTTP_400_BAD_REQUEST),
    (InvalidLayoutNameError, status.HTTP_400_BAD_REQUEST),
    (FilterError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (ColumnError, status.HTTP_422_UNPROCESSABLE_ENTITY),
]


def status_code_for(exc: PriceGridError) -> int:
    for error_cls, status_code in ERROR_STATUS_CODES:
        if isinstance(exc, error_cls):
            return status_code
    return status.HTTP_400_BAD_REQUEST


@app.exception_handler(PriceGridError)
async def price_grid_error_handler(request: Request, exc: PriceGridError) -> JSONResponse:
    """Turn domain errors into JSON responses the front end can show."""
    content: Dict[str, Any] = {"detail": str(exc), "error": type(exc).__name__}
    if isinstance(exc, FilterError) and exc.field:
        content["field"] = exc.field

    status_code = status_code_for(exc)
    logger.info(f"{request.method} {request.url.path} -> {status_code} {type(exc).__name__}")
    return JSONResponse(status_code=status_code, content=content)


@app.on_event("startup")
async def startup_event():
    """Start an empty grid session."""
    logger.info("Initializing grid session...")
    app.state.session = GridSession(settings)
    logger.info("Grid session initialized successfully")


@app.get("/ping")
async def pong(settings: Settings = Depends(get_settings)) -> Dict[str, Any]:
    """Ping the API to check if it's running."""
    return {
        "ping": "pong!",
        "environment": settings.environment,
        "testing": settings.testing,
    }
