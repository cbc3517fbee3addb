"""Service enforcing the cascading product hierarchy filters."""

import logging
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from price_grid.core.exceptions import (
    CascadeViolation,
    FilterError,
    FilterRangeError,
    FilterValueError,
)
from price_grid.models.product_hierarchy import DEFAULT_PRODUCT_HIERARCHY, ProductHierarchy
from price_grid.models.table_state import FilterState, TableType

logger = logging.getLogger(__name__)

# Hierarchy fields, parent first
HIERARCHY_FIELDS: List[str] = ["dept", "class", "subClass", "style"]

# Fields that only apply to weekly data tables
WEEKLY_ONLY_FIELDS: List[str] = ["timePeriod", "startDate", "endDate"]

# Wire name -> FilterState attribute
FIELD_ATTRIBUTES: Dict[str, str] = {
    "dept": "dept",
    "class": "class_",
    "subClass": "sub_class",
    "style": "style",
    "timePeriod": "time_period",
    "startDate": "start_date",
    "endDate": "end_date",
}

FIELD_LABELS: Dict[str, str] = {
    "dept": "department",
    "class": "class",
    "subClass": "sub-class",
    "style": "style",
}

TIME_PERIODS: Dict[str, str] = {
    "fall-2024": "Fall 2024",
    "spring-2024": "Spring 2024",
}


def normalize_field_name(field_name: str) -> Optional[str]:
    """Return the wire name for a filter field given either naming form."""
    if field_name in FIELD_ATTRIBUTES:
        return field_name
    for wire_name, attribute in FIELD_ATTRIBUTES.items():
        if attribute == field_name:
            return wire_name
    return None


class FilterHierarchyResolver:
    """Lookups and validation for the dept -> class -> subClass -> style cascade."""

    def __init__(
        self,
        hierarchy: Optional[ProductHierarchy] = None,
        time_periods: Optional[Dict[str, str]] = None,
    ):
        self.hierarchy = hierarchy or DEFAULT_PRODUCT_HIERARCHY
        self.time_periods = dict(time_periods if time_periods is not None else TIME_PERIODS)

    # Lookups

    def available_departments(self) -> List[str]:
        return list(self.hierarchy.departments)

    def available_classes(self, dept: str) -> List[str]:
        if not dept:
            return []
        return list(self.hierarchy.classes.get(dept, []))

    def available_sub_classes(self, cls: str) -> List[str]:
        if not cls:
            return []
        return list(self.hierarchy.sub_classes.get(cls, []))

    def available_styles(self, sub_class: str) -> List[str]:
        if not sub_class:
            return []
        return list(self.hierarchy.styles.get(sub_class, []))

    def available_time_periods(self) -> Dict[str, str]:
        return dict(self.time_periods)

    def _children_of(self, field_name: str, parent_value: str) -> List[str]:
        if field_name == "class":
            return self.available_classes(parent_value)
        if field_name == "subClass":
            return self.available_sub_classes(parent_value)
        if field_name == "style":
            return self.available_styles(parent_value)
        return self.available_departments()

    # Validation

    def validate(self, filters: FilterState) -> None:
        """Check a complete filter state.

        Raises:
            CascadeViolation: If a child field is set while its parent is empty,
                or its value is not among the parent's children.
            FilterValueError: If the department or time period is unknown.
            FilterRangeError: If the start date falls after the end date.
        """
        if filters.dept and filters.dept not in self.hierarchy.departments:
            raise FilterValueError(f"Unknown department {filters.dept!r}", field="dept")

        for parent, child in zip(HIERARCHY_FIELDS, HIERARCHY_FIELDS[1:]):
            parent_value = getattr(filters, FIELD_ATTRIBUTES[parent])
            child_value = getattr(filters, FIELD_ATTRIBUTES[child])
            if not child_value:
                continue
            if not parent_value:
                raise CascadeViolation(
                    f"Choose a {FIELD_LABELS[parent]} before choosing a {FIELD_LABELS[child]}",
                    field=child,
                )
            if child_value not in self._children_of(child, parent_value):
                raise CascadeViolation(
                    f"{FIELD_LABELS[child].capitalize()} {child_value!r} does not belong to "
                    f"{FIELD_LABELS[parent]} {parent_value!r}",
                    field=child,
                )

        if filters.time_period and filters.time_period not in self.time_periods:
            raise FilterValueError(
                f"Unknown time period {filters.time_period!r}", field="timePeriod"
            )

        if filters.start_date and filters.end_date and filters.start_date > filters.end_date:
            raise FilterRangeError(
                f"Start date {filters.start_date} is after end date {filters.end_date}",
                field="startDate",
            )

    def is_valid(self, filters: FilterState) -> bool:
        try:
            self.validate(filters)
        except FilterError:
            return False
        return True

    # Edits

    @staticmethod
    def clear_descendants(filters: FilterState, changed_field: str) -> FilterState:
        """Return a copy of ``filters`` with every descendant of ``changed_field`` emptied.

        Fields outside the hierarchy have no descendants, so the copy is
        otherwise identical.
        """
        wire_name = normalize_field_name(changed_field)
        if wire_name not in HIERARCHY_FIELDS:
            return filters.model_copy(deep=True)

        descendants = HIERARCHY_FIELDS[HIERARCHY_FIELDS.index(wire_name) + 1:]
        return filters.model_copy(
            update={FIELD_ATTRIBUTES[name]: "" for name in descendants},
            deep=True,
        )

    def set_field(self, filters: FilterState, field_name: str, value: Any) -> FilterState:
        """Return a new filter state with one field changed and its descendants cleared.

        The result is not validated; callers validate before committing.
        """
        wire_name = normalize_field_name(field_name)
        if wire_name is None:
            raise FilterValueError(f"Unknown filter field {field_name!r}", field=field_name)

        payload = filters.model_dump()
        payload[FIELD_ATTRIBUTES[wire_name]] = value
        try:
            updated = FilterState.model_validate(payload)
        except ValidationError as e:
            raise FilterValueError(
                f"Invalid value for {wire_name}: {value!r}", field=wire_name
            ) from e

        if getattr(updated, FIELD_ATTRIBUTES[wire_name]) == getattr(filters, FIELD_ATTRIBUTES[wire_name]):
            return updated
        return self.clear_descendants(updated, wire_name)

    # Applicability

    @staticmethod
    def is_field_applicable(table_type: Union[TableType, str], field_name: str) -> bool:
        """Return whether a filter field applies to a table type."""
        wire_name = normalize_field_name(field_name)
        if wire_name is None:
            return False
        if wire_name in WEEKLY_ONLY_FIELDS:
            try:
                return TableType(table_type) == TableType.WEEKLY_DATA
            except ValueError:
                return False
        return True

    def applicable_fields(self, table_type: Union[TableType, str]) -> List[str]:
        return [name for name in FIELD_ATTRIBUTES if self.is_field_applicable(table_type, name)]
