"""Pydantic schemas for the storefront API.

All request/response models are defined here for easy import.
"""

from storefront.schemas.common import ApiResponse, ErrorDetail, ErrorResponse, ListMeta
from storefront.schemas.product import ProductResponse
from storefront.schemas.category import CategoryFamilyResponse, CategoryResponse
from storefront.schemas.section import ResolvedSectionResponse, SectionResponse, TabResponse
from storefront.schemas.health import HealthCheckResponse

__all__ = [
    # Common
    "ApiResponse",
    "ErrorDetail",
    "ErrorResponse",
    "ListMeta",
    # Product
    "ProductResponse",
    # Category
    "CategoryResponse",
    "CategoryFamilyResponse",
    # Section
    "SectionResponse",
    "ResolvedSectionResponse",
    "TabResponse",
    # Health
    "HealthCheckResponse",
]
