"""Home sections API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from storefront.api.v1.serializers import product_list
from storefront.config import settings
from storefront.core.exceptions import NotFoundError
from storefront.dependencies import get_home_service
from storefront.models.section import SECTION_TYPE_SLIDER, SECTION_TYPE_TABBED
from storefront.schemas import ApiResponse, ListMeta, SectionResponse
from storefront.services.home_service import HomeService
from storefront.services.ranking_service import ProductTab

router = APIRouter()


@router.get("", response_model=ApiResponse)
async def list_sections(service: HomeService = Depends(get_home_service)):
    """List active section descriptors ordered by sort_order."""
    return ApiResponse(
        status="success",
        data=[SectionResponse.model_validate(s) for s in service.active_sections()],
    )


@router.get("/{section_id}/products", response_model=ApiResponse)
async def get_section_products(
    section_id: str,
    limit: Optional[int] = Query(None, ge=1, le=100, description="Override the display cap"),
    tab: str = Query(settings.DEFAULT_TAB, description="Tab used when the section is tabbed"),
    service: HomeService = Depends(get_home_service),
):
    """Get the products a single section displays.

    Returns 404 if the section does not exist, or if the section is tabbed
    and ``tab`` is not a known tab. Section types the home page does not
    render get an empty list. Inactive sections can still be previewed here.
    """
    section = service.get_section(section_id)

    if section.type == SECTION_TYPE_TABBED:
        selected = ProductTab.parse(tab)
        if selected is None:
            raise NotFoundError("Tab", tab)
        products = service.tab_products(selected, limit=limit)
        applied_limit = limit or service.tab_limit
    elif section.type == SECTION_TYPE_SLIDER:
        products = service.section_products(section, limit=limit)
        applied_limit = limit or service.section_limit
    else:
        products = []
        applied_limit = limit or service.section_limit

    return ApiResponse(
        status="success",
        data=product_list(products),
        meta=ListMeta(limit=applied_limit, count=len(products), total=len(products)),
    )
