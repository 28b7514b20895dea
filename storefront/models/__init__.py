"""Domain models for the storefront catalog.

All models are immutable pydantic models; the engine never mutates them.
"""

from storefront.models.product import Product
from storefront.models.category import Category
from storefront.models.order import CartItem, Order
from storefront.models.section import (
    FILTER_CATEGORY,
    FILTER_FEATURED,
    FILTER_SALE,
    SECTION_TYPE_SLIDER,
    SECTION_TYPE_TABBED,
    HomeSection,
)
from storefront.models.catalog import CatalogSnapshot

__all__ = [
    "Product",
    "Category",
    "CartItem",
    "Order",
    "HomeSection",
    "CatalogSnapshot",
    "FILTER_CATEGORY",
    "FILTER_FEATURED",
    "FILTER_SALE",
    "SECTION_TYPE_SLIDER",
    "SECTION_TYPE_TABBED",
]
