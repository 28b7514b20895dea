"""Home section descriptor model."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

# Section display types
SECTION_TYPE_SLIDER = "slider"
SECTION_TYPE_TABBED = "tabbed-slider"

# Section filter types
FILTER_CATEGORY = "category"
FILTER_SALE = "sale"
FILTER_FEATURED = "featured"


class HomeSection(BaseModel):
    """Declarative descriptor for one home page product collection.

    Configured by the admin surface; the engine only reads a snapshot.
    ``filter_value`` matters only for ``category`` filters, where it may be
    a category id, slug or name, or a raw category label.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    id: str
    type: str = SECTION_TYPE_SLIDER
    title: str = ""
    filter_type: Optional[str] = None
    filter_value: Optional[str] = None
    is_active: bool = True
    sort_order: int = 0

    @field_validator("id", "filter_value", mode="before")
    @classmethod
    def coerce_str(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    def __repr__(self) -> str:
        return f"<HomeSection(id='{self.id}', type='{self.type}', filter={self.filter_type}:{self.filter_value})>"
