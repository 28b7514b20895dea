"""Home page API endpoint."""

from fastapi import APIRouter, Depends, Query

from storefront.api.v1.serializers import resolved_section
from storefront.config import settings
from storefront.dependencies import get_home_service
from storefront.schemas import ApiResponse
from storefront.services.home_service import HomeService

router = APIRouter()


@router.get("", response_model=ApiResponse)
async def get_home(
    tab: str = Query(settings.DEFAULT_TAB, description="Active tab for the tabbed section"),
    service: HomeService = Depends(get_home_service),
):
    """Resolve every active home section in display order.

    Slider sections carry up to SECTION_DISPLAY_LIMIT products and a
    "view all" link; the tabbed section carries up to TAB_DISPLAY_LIMIT
    products for the selected tab. Unknown tab labels fall back to ON SALE.
    """
    sections = service.build_home(active_tab=tab)

    return ApiResponse(
        status="success",
        data=[resolved_section(s) for s in sections],
    )
