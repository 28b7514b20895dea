"""FastAPI dependency injection providers."""

from fastapi import Depends, Request

from storefront.config import settings
from storefront.models.catalog import CatalogSnapshot
from storefront.services.home_service import HomeService


def get_catalog(request: Request) -> CatalogSnapshot:
    """Return the catalog snapshot loaded at startup.

    The snapshot is immutable, so handlers can share it across requests.
    Falls back to an empty catalog if the lifespan did not run.
    """
    snapshot = getattr(request.app.state, "catalog", None)
    if snapshot is None:
        return CatalogSnapshot()
    return snapshot


def get_home_service(catalog: CatalogSnapshot = Depends(get_catalog)) -> HomeService:
    """Build a HomeService over the current snapshot with configured caps and default tab.

    Usage:
        @router.get("/home")
        async def get_home(service: HomeService = Depends(get_home_service)):
            return service.build_home()
    """
    return HomeService(
        catalog,
        section_limit=settings.SECTION_DISPLAY_LIMIT,
        tab_limit=settings.TAB_DISPLAY_LIMIT,
        default_tab=settings.DEFAULT_TAB,
    )
