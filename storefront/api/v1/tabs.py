"""Featured product tab API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from storefront.api.v1.serializers import product_list
from storefront.core.exceptions import NotFoundError
from storefront.dependencies import get_catalog, get_home_service
from storefront.models.catalog import CatalogSnapshot
from storefront.schemas import ApiResponse, ListMeta, TabResponse
from storefront.services.display import cap
from storefront.services.home_service import HomeService
from storefront.services.ranking_service import ProductTab, rank_for_tab

router = APIRouter()


@router.get("", response_model=ApiResponse)
async def list_tabs():
    """List the tab labels in display order."""
    return ApiResponse(
        status="success",
        data=[TabResponse(label=tab.value, slug=tab.slug) for tab in ProductTab.ordered()],
    )


@router.get("/{tab}/products", response_model=ApiResponse)
async def get_tab_products(
    tab: str,
    limit: Optional[int] = Query(None, ge=1, le=100, description="Override the display cap"),
    catalog: CatalogSnapshot = Depends(get_catalog),
    service: HomeService = Depends(get_home_service),
):
    """Rank the full catalog for a tab ("on-sale", "new-products", "best-selling").

    ``meta.total`` is the number of ranked products before capping.
    """
    selected = ProductTab.parse(tab)
    if selected is None:
        raise NotFoundError("Tab", tab)

    ranked = rank_for_tab(catalog.products, catalog.orders, selected)
    products = cap(ranked, limit or service.tab_limit)

    return ApiResponse(
        status="success",
        data=product_list(products),
        meta=ListMeta(limit=limit or service.tab_limit, count=len(products), total=len(ranked)),
    )
