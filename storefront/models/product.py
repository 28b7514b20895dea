"""Product model for the storefront catalog."""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Optional

import structlog
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)
from pydantic.alias_generators import to_camel

logger = structlog.get_logger(__name__)


class Product(BaseModel):
    """A catalog product.

    Products reference their category by free-text label rather than by id;
    the label is matched case-insensitively against ``Category.name``.
    Accepts the storefront's camelCase keys (``originalPrice``,
    ``isFeatured``, ``createdAt``) as well as the field names.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    id: str
    name: str = ""
    price: Decimal = Field(ge=0)
    original_price: Optional[Decimal] = None
    category: str = ""
    is_featured: bool = False
    created_at: Optional[datetime] = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> Any:
        if isinstance(value, int):
            return str(value)
        return value

    @field_validator("category", mode="before")
    @classmethod
    def empty_category(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("created_at", mode="wrap")
    @classmethod
    def lenient_created_at(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Optional[datetime]:
        """Parse like any datetime field, but map unparseable input to None.

        Naive results are taken as UTC so every timestamp compares cleanly.
        """
        try:
            parsed = handler(value)
        except ValidationError:
            logger.warning("malformed_timestamp", product_field="created_at", value=repr(value))
            return None
        if parsed is not None and parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed

    @property
    def is_on_sale(self) -> bool:
        """True when a pre-discount price exists and exceeds the current one."""
        return self.original_price is not None and self.original_price > self.price

    def __repr__(self) -> str:
        return f"<Product(id='{self.id}', category='{self.category}', price={self.price})>"
