"""Order history models used for sales-frequency ranking."""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CartItem(BaseModel):
    """A purchased line item.

    ``id`` is whatever id the cart recorded: a base product id or a variant
    id. It is never resolved to a parent product.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    quantity: int = Field(gt=0)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> Any:
        if isinstance(value, int):
            return str(value)
        return value


class Order(BaseModel):
    """An immutable historical order."""

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    items: List[CartItem] = []
