"""Conversions from service results to response schemas."""

from typing import Iterable, List

from storefront.models.product import Product
from storefront.schemas import ProductResponse, ResolvedSectionResponse, SectionResponse
from storefront.services.home_service import ResolvedSection


def product_list(products: Iterable[Product]) -> List[ProductResponse]:
    return [ProductResponse.model_validate(p) for p in products]


def resolved_section(resolved: ResolvedSection) -> ResolvedSectionResponse:
    return ResolvedSectionResponse(
        section=SectionResponse.model_validate(resolved.section),
        products=product_list(resolved.products),
        view_all_link=resolved.view_all_link,
        active_tab=resolved.active_tab.value if resolved.active_tab else None,
        tabs=[tab.value for tab in resolved.tabs],
    )
