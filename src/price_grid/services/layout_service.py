"""Service for managing saved grid layouts in memory."""

import logging
from typing import Dict, Iterable, List

from price_grid.core.exceptions import (
    DuplicateNameError,
    InvalidLayoutNameError,
    LayoutNotFoundError,
)
from price_grid.models.layout import SavedLayout
from price_grid.models.table_state import Table

# Set up logging
logger = logging.getLogger(__name__)


class LayoutStore:
    """Named snapshots of the table collection, kept for the session only.

    Snapshots go in and come out as deep copies, so edits to the live
    tables never reach a saved layout and vice versa.
    """

    def __init__(self):
        self._layouts: Dict[str, SavedLayout] = {}

    def __len__(self) -> int:
        return len(self._layouts)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip() in self._layouts

    def save(self, name: str, tables: Iterable[Table]) -> SavedLayout:
        """Save a snapshot of ``tables`` under ``name``.

        Raises:
            InvalidLayoutNameError: If the name is empty or contains a slash.
            DuplicateNameError: If a layout with this name already exists.
        """
        name = (name or "").strip()
        if not name:
            logger.warning("Layout save rejected: empty name")
            raise InvalidLayoutNameError("Layout name must not be empty")

        if "/" in name:
            logger.warning(f"Layout save rejected: {name} contains a slash")
            raise InvalidLayoutNameError('Layout name must not contain "/"')

        if name in self._layouts:
            logger.warning(f"Layout save rejected: {name} already exists")
            raise DuplicateNameError(f"A layout named {name} already exists")

        layout = SavedLayout(
            name=name,
            snapshot=[table.model_copy(deep=True) for table in tables],
        )
        self._layouts[name] = layout
        logger.info(f"Saved layout {name} with {len(layout.snapshot)} tables")

        return layout.model_copy(deep=True)

    def get(self, name: str) -> SavedLayout:
        """Get a saved layout by name."""
        layout = self._layouts.get((name or "").strip())
        if layout is None:
            logger.warning(f"Layout {name} not found")
            raise LayoutNotFoundError(f"Layout {name} not found")
        return layout.model_copy(deep=True)

    def load(self, name: str) -> List[Table]:
        """Return a deep copy of the tables saved under ``name``."""
        layout = self.get(name)
        logger.info(f"Loaded layout {layout.name} with {len(layout.snapshot)} tables")
        return layout.snapshot

    def list(self) -> List[SavedLayout]:
        """List saved layouts in the order they were saved."""
        layouts = [layout.model_copy(deep=True) for layout in self._layouts.values()]
        logger.info(f"Listed {len(layouts)} layouts")
        return layouts

    def names(self) -> List[str]:
        return list(self._layouts)

    def delete(self, name: str) -> None:
        """Delete a saved layout by name."""
        key = (name or "").strip()
        if key not in self._layouts:
            logger.warning(f"Layout {name} not found")
            raise LayoutNotFoundError(f"Layout {name} not found")

        del self._layouts[key]
        logger.info(f"Deleted layout {key}")

    def clear(self) -> None:
        self._layouts = {}
