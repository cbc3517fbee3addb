"""Tests for the cascading filter hierarchy resolver."""

from datetime import date

import pytest

from price_grid.core.exceptions import CascadeViolation, FilterRangeError, FilterValueError
from price_grid.models.product_hierarchy import ProductHierarchy
from price_grid.models.table_state import FilterState, TableType
from price_grid.services.filter_service import FilterHierarchyResolver


@pytest.fixture
def full_filters():
    """Create a filter state with every hierarchy level set."""
    return FilterState(
        dept="Women's dress shoes",
        class_="Aged/strappy",
        sub_class="Candies",
        style="Two strap woven",
    )


def test_available_lookups(filter_resolver):
    """Test each level lists its parent's children."""
    assert filter_resolver.available_departments() == ["Women's dress shoes", "Men's casual shoes"]
    assert filter_resolver.available_classes("Women's dress shoes") == ["Aged/strappy", "Classic"]
    assert filter_resolver.available_sub_classes("Aged/strappy") == ["Candies", "Formal"]
    assert filter_resolver.available_styles("Candies") == ["Two strap woven", "Single strap leather"]


def test_available_lookups_for_empty_or_unknown_parent(filter_resolver):
    """Test empty and unknown parents have no children."""
    assert filter_resolver.available_classes("") == []
    assert filter_resolver.available_classes("Men's casual shoes") == []
    assert filter_resolver.available_sub_classes("Classic") == []
    assert filter_resolver.available_styles("") == []


def test_validate_accepts_full_cascade(filter_resolver, full_filters):
    """Test a consistent filter state validates."""
    filter_resolver.validate(full_filters)
    filter_resolver.validate(FilterState())
    assert filter_resolver.is_valid(full_filters)


def test_validate_rejects_child_without_parent(filter_resolver):
    """Test a class without a department is a cascade violation."""
    with pytest.raises(CascadeViolation, match="department") as exc_info:
        filter_resolver.validate(FilterState(class_="Classic"))

    assert exc_info.value.field == "class"


def test_validate_rejects_gap_in_cascade(filter_resolver):
    """Test a style without a sub-class is rejected even if the department is set."""
    filters = FilterState(dept="Women's dress shoes", class_="Aged/strappy", style="Two strap woven")

    with pytest.raises(CascadeViolation) as exc_info:
        filter_resolver.validate(filters)

    assert exc_info.value.field == "style"


def test_validate_rejects_child_of_other_parent(filter_resolver):
    """Test a class that belongs to another department is rejected."""
    filters = FilterState(dept="Men's casual shoes", class_="Classic")

    with pytest.raises(CascadeViolation, match="does not belong"):
        filter_resolver.validate(filters)

    assert not filter_resolver.is_valid(filters)


def test_validate_rejects_unknown_department(filter_resolver):
    """Test departments must come from the hierarchy."""
    with pytest.raises(FilterValueError):
        filter_resolver.validate(FilterState(dept="Kids"))


def test_validate_time_period_and_dates(filter_resolver):
    """Test the weekly data fields are checked."""
    filter_resolver.validate(
        FilterState(time_period="fall-2024", start_date="2024-09-01", end_date="2024-11-30")
    )

    with pytest.raises(FilterValueError):
        filter_resolver.validate(FilterState(time_period="winter-1999"))

    with pytest.raises(FilterRangeError):
        filter_resolver.validate(
            FilterState(start_date=date(2024, 12, 1), end_date=date(2024, 11, 1))
        )


def test_clear_descendants_of_dept(filter_resolver, full_filters):
    """Test changing the department clears everything below it."""
    cleared = filter_resolver.clear_descendants(full_filters, "dept")

    assert cleared.dept == "Women's dress shoes"
    assert cleared.class_ == ""
    assert cleared.sub_class == ""
    assert cleared.style == ""
    # The input is left alone
    assert full_filters.style == "Two strap woven"


def test_clear_descendants_of_sub_class(filter_resolver, full_filters):
    """Test only strict descendants are cleared."""
    cleared = filter_resolver.clear_descendants(full_filters, "subClass")

    assert cleared.class_ == "Aged/strappy"
    assert cleared.sub_class == "Candies"
    assert cleared.style == ""


def test_clear_descendants_of_non_hierarchy_field(filter_resolver, full_filters):
    """Test fields outside the hierarchy clear nothing."""
    assert filter_resolver.clear_descendants(full_filters, "timePeriod") == full_filters


def test_changing_dept_clears_descendants(filter_resolver, full_filters):
    """Test a full cascade validates and a new department empties its children."""
    filter_resolver.validate(full_filters)

    updated = filter_resolver.set_field(full_filters, "dept", "Men's casual shoes")

    assert updated.dept == "Men's casual shoes"
    assert (updated.class_, updated.sub_class, updated.style) == ("", "", "")
    filter_resolver.validate(updated)


def test_set_field_same_value_keeps_children(filter_resolver, full_filters):
    """Test re-selecting the current value does not clear anything."""
    assert filter_resolver.set_field(full_filters, "dept", "Women's dress shoes") == full_filters


def test_set_field_accepts_attribute_names(filter_resolver):
    """Test attribute names work as well as wire names."""
    updated = filter_resolver.set_field(FilterState(), "start_date", "2024-03-01")

    assert updated.start_date == date(2024, 3, 1)


def test_set_field_rejects_unknown_field_and_bad_value(filter_resolver):
    """Test unknown fields and unparseable values are rejected."""
    with pytest.raises(FilterValueError):
        filter_resolver.set_field(FilterState(), "colour", "red")

    with pytest.raises(FilterValueError):
        filter_resolver.set_field(FilterState(), "startDate", "not a date")


@pytest.mark.parametrize(
    "table_type, field, expected",
    [
        (TableType.WEEKLY_DATA, "timePeriod", True),
        (TableType.WEEKLY_DATA, "startDate", True),
        (TableType.WHITE_TICKET, "endDate", False),
        ("promotion-planning", "timePeriod", False),
        (TableType.PROMOTION_PLANNING, "dept", True),
        (TableType.WHITE_TICKET, "subClass", True),
        (TableType.WEEKLY_DATA, "colour", False),
    ],
)
def test_is_field_applicable(table_type, field, expected):
    """Test the weekly-only fields apply to weekly data tables only."""
    assert FilterHierarchyResolver.is_field_applicable(table_type, field) is expected


def test_applicable_fields(filter_resolver):
    """Test the list of fields shown per table type."""
    assert filter_resolver.applicable_fields(TableType.WHITE_TICKET) == [
        "dept", "class", "subClass", "style",
    ]
    assert len(filter_resolver.applicable_fields(TableType.WEEKLY_DATA)) == 7


def test_custom_hierarchy_from_json(tmp_path):
    """Test a hierarchy can be loaded from a JSON file."""
    path = tmp_path / "hierarchy.json"
    path.write_text(
        '{"departments": ["Boots"], "classes": {"Boots": ["Hiking"]},'
        ' "subClasses": {"Hiking": ["Trail"]}, "styles": {"Trail": ["Low"]}}',
        encoding="utf-8",
    )

    resolver = FilterHierarchyResolver(ProductHierarchy.from_json_file(path))

    assert resolver.available_departments() == ["Boots"]
    assert resolver.available_sub_classes("Hiking") == ["Trail"]
    resolver.validate(FilterState(dept="Boots", class_="Hiking", sub_class="Trail", style="Low"))
