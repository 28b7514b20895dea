"""Product Pydantic schemas for response serialization."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ProductResponse(BaseModel):
    """Product response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    price: Decimal
    original_price: Optional[Decimal] = None
    category: str
    is_featured: bool
    is_on_sale: bool
    created_at: Optional[datetime] = None
