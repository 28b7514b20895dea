"""Read-only catalog snapshot bundling everything a render needs."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from storefront.models.category import Category
from storefront.models.order import Order
from storefront.models.product import Product
from storefront.models.section import HomeSection


class CatalogSnapshot(BaseModel):
    """Products, categories, order history and home sections at one point in time."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    products: List[Product] = []
    categories: List[Category] = []
    orders: List[Order] = []
    sections: List[HomeSection] = Field(default_factory=list, alias="homeSections")
