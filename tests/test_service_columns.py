"""Tests for the column template resolver."""

import pytest

from price_grid.models.table_state import TableType
from price_grid.services.column_service import AVAILABLE_METRICS, ColumnTemplateResolver


@pytest.fixture
def resolver():
    """Create a column template resolver."""
    return ColumnTemplateResolver()


@pytest.mark.parametrize(
    "table_type, expected",
    [
        (TableType.WEEKLY_DATA, ["Week", "Sales $", "Units", "LY PPT", "AUR", "Price"]),
        (TableType.PROMOTION_PLANNING, ["Promo event", "Price", "Units", "Sales $", "AUR", "Notes"]),
        ("white-ticket", ["White Ticket Price", "Ranking", "Units", "AUR", "Sales $", "IMU"]),
    ],
)
def test_default_columns(resolver, table_type, expected):
    """Test each table type gets its default column set."""
    assert resolver.default_columns(table_type) == expected


def test_unknown_type_has_no_columns(resolver):
    """Test an unknown type yields no columns rather than failing."""
    assert resolver.default_columns("monthly-data") == []


def test_default_columns_are_fresh_copies(resolver):
    """Test callers cannot corrupt the lookup table."""
    columns = resolver.default_columns(TableType.WHITE_TICKET)
    columns.append("Notes")

    assert "Notes" not in resolver.default_columns(TableType.WHITE_TICKET)


def test_templates(resolver):
    """Test the fixed template catalog."""
    templates = resolver.templates()

    assert [t.id for t in templates] == ["white-ticket", "promo-planning", "weekly-data"]
    assert templates[1].title == "PROMOTION PLANNING TABLE"
    assert templates[1].type == TableType.PROMOTION_PLANNING


def test_get_template_by_id_or_type(resolver):
    """Test templates resolve by ID and by table type."""
    assert resolver.get_template("promo-planning").type == TableType.PROMOTION_PLANNING
    assert resolver.get_template("promotion-planning").id == "promo-planning"
    assert resolver.get_template("nope") is None


def test_default_columns_are_known_metrics(resolver):
    """Test every default column can be selected as a metric."""
    for table_type in TableType:
        for column in resolver.default_columns(table_type):
            assert column in AVAILABLE_METRICS
    assert resolver.is_known_metric("IMU")
    assert not resolver.is_known_metric("Margin")
