"""Home section Pydantic schemas for response serialization."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from storefront.schemas.product import ProductResponse


class SectionResponse(BaseModel):
    """Section descriptor response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    type: str
    title: str
    filter_type: Optional[str] = None
    filter_value: Optional[str] = None
    is_active: bool
    sort_order: int


class ResolvedSectionResponse(BaseModel):
    """A home section with the products it displays."""

    model_config = ConfigDict(from_attributes=True)

    section: SectionResponse
    products: List[ProductResponse] = []
    view_all_link: Optional[str] = None
    active_tab: Optional[str] = None
    tabs: List[str] = []


class TabResponse(BaseModel):
    """Tab label with its URL-friendly slug."""

    label: str
    slug: str
