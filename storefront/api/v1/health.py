"""Health check endpoint."""

from fastapi import APIRouter, Depends

from storefront.config import settings
from storefront.dependencies import get_catalog
from storefront.models.catalog import CatalogSnapshot
from storefront.schemas import HealthCheckResponse

router = APIRouter()


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(catalog: CatalogSnapshot = Depends(get_catalog)):
    """Return service health status with the size of the loaded catalog.

    Status is "degraded" when the catalog has no products, since every
    section would render empty.
    """
    return HealthCheckResponse(
        status="ok" if catalog.products else "degraded",
        environment=settings.ENVIRONMENT,
        products=len(catalog.products),
        categories=len(catalog.categories),
        orders=len(catalog.orders),
        sections=len(catalog.sections),
    )
