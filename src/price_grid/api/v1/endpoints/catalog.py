"""API endpoints for templates, metrics and the product hierarchy."""

from fastapi import APIRouter, Depends, Query

from price_grid.core.dependencies import get_session
from price_grid.models.table_state import TableType
from price_grid.schemas.catalog_api import (
    GridResponse,
    TemplateListResponse,
    TimePeriodsResponse,
    ValuesResponse,
)
from price_grid.services.session import GridSession

router = APIRouter()


@router.get("/templates", response_model=TemplateListResponse)
async def list_templates(session: GridSession = Depends(get_session)) -> TemplateListResponse:
    """List the draggable table templates."""
    return TemplateListResponse(items=session.column_resolver.templates())


@router.get("/metrics", response_model=ValuesResponse)
async def list_metrics(session: GridSession = Depends(get_session)) -> ValuesResponse:
    """List the metrics a column header can show."""
    return ValuesResponse(values=session.column_resolver.available_metrics())


@router.get("/grid", response_model=GridResponse)
async def grid_dimensions(session: GridSession = Depends(get_session)) -> GridResponse:
    return GridResponse(
        row_count=session.grid.row_count,
        col_count=session.grid.col_count,
        capacity=session.grid.capacity,
    )


@router.get("/hierarchy/departments", response_model=ValuesResponse)
async def list_departments(session: GridSession = Depends(get_session)) -> ValuesResponse:
    return ValuesResponse(values=session.filter_resolver.available_departments())


@router.get("/hierarchy/classes", response_model=ValuesResponse)
async def list_classes(
    dept: str = Query(default=""),
    session: GridSession = Depends(get_session),
) -> ValuesResponse:
    return ValuesResponse(values=session.filter_resolver.available_classes(dept))


@router.get("/hierarchy/sub-classes", response_model=ValuesResponse)
async def list_sub_classes(
    cls: str = Query(default=""),
    session: GridSession = Depends(get_session),
) -> ValuesResponse:
    return ValuesResponse(values=session.filter_resolver.available_sub_classes(cls))


@router.get("/hierarchy/styles", response_model=ValuesResponse)
async def list_styles(
    sub_class: str = Query(default=""),
    session: GridSession = Depends(get_session),
) -> ValuesResponse:
    return ValuesResponse(values=session.filter_resolver.available_styles(sub_class))


@router.get("/hierarchy/time-periods", response_model=TimePeriodsResponse)
async def list_time_periods(session: GridSession = Depends(get_session)) -> TimePeriodsResponse:
    return TimePeriodsResponse(values=session.filter_resolver.available_time_periods())


@router.get("/hierarchy/applicable-fields/{table_type}", response_model=ValuesResponse)
async def applicable_fields(
    table_type: TableType,
    session: GridSession = Depends(get_session),
) -> ValuesResponse:
    """List the filter fields shown for a table type."""
    return ValuesResponse(values=session.filter_resolver.applicable_fields(table_type))
