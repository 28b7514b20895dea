"""Category Pydantic schemas for response serialization."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class CategoryResponse(BaseModel):
    """Category response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    slug: Optional[str] = None
    parent_id: Optional[str] = None


class CategoryFamilyResponse(BaseModel):
    """Resolved category family for a filter value.

    ``matched`` is False when no category matched and the value itself was
    used as a literal category label.
    """

    filter_value: str
    matched: bool
    target: Optional[CategoryResponse] = None
    names: List[str] = []
