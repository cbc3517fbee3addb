"""Product hierarchy reference data used by the cascading filters."""

import logging
from pathlib import Path
from typing import Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class ProductHierarchy(BaseModel):
    """Four-level tree: departments -> classes -> subClasses -> styles.

    Each level below departments is keyed by the selected value of its
    parent level.
    """

    departments: List[str] = Field(default_factory=list)
    classes: Dict[str, List[str]] = Field(default_factory=dict)
    sub_classes: Dict[str, List[str]] = Field(default_factory=dict, alias="subClasses")
    styles: Dict[str, List[str]] = Field(default_factory=dict)

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "ProductHierarchy":
        """Load a hierarchy from a JSON file."""
        path = Path(path)
        hierarchy = cls.model_validate_json(path.read_text(encoding="utf-8"))
        logger.info(
            f"Loaded product hierarchy from {path} with {len(hierarchy.departments)} departments"
        )
        return hierarchy


DEFAULT_PRODUCT_HIERARCHY = ProductHierarchy(
    departments=["Women's dress shoes", "Men's casual shoes"],
    classes={"Women's dress shoes": ["Aged/strappy", "Classic"]},
    sub_classes={"Aged/strappy": ["Candies", "Formal"]},
    styles={"Candies": ["Two strap woven", "Single strap leather"]},
)
