"""Category model for product classification."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class Category(BaseModel):
    """Product category with hierarchical support.

    Categories nest through ``parent_id`` to form a forest
    (e.g., 'Electronics' > 'Audio' > 'Headphones'). ``name`` is the join
    key against ``Product.category``; ``slug`` is an alternate lookup key.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    id: str
    name: str
    slug: Optional[str] = None
    parent_id: Optional[str] = None

    @field_validator("id", "parent_id", mode="before")
    @classmethod
    def coerce_ids(cls, value: Any) -> Any:
        if value == "":
            return None
        if isinstance(value, int):
            return str(value)
        return value

    def __repr__(self) -> str:
        return f"<Category(id='{self.id}', slug='{self.slug}', name='{self.name}')>"
