"""Categories API endpoints."""

from fastapi import APIRouter, Depends

from storefront.dependencies import get_catalog
from storefront.models.catalog import CatalogSnapshot
from storefront.schemas import ApiResponse, CategoryFamilyResponse, CategoryResponse
from storefront.services.category_service import CategoryTree

router = APIRouter()


@router.get("", response_model=ApiResponse)
async def list_categories(catalog: CatalogSnapshot = Depends(get_catalog)):
    """List all categories in catalog order."""
    return ApiResponse(
        status="success",
        data=[CategoryResponse.model_validate(c) for c in catalog.categories],
    )


@router.get("/{value}/family", response_model=ApiResponse)
async def get_category_family(value: str, catalog: CatalogSnapshot = Depends(get_catalog)):
    """Resolve a category id, slug or name to its family of category names.

    When nothing matches, the value itself is returned as a literal label
    and ``matched`` is false.
    """
    tree = CategoryTree(catalog.categories)
    target = tree.find(value)
    names = tree.family(value)

    return ApiResponse(
        status="success",
        data=CategoryFamilyResponse(
            filter_value=value,
            matched=target is not None,
            target=CategoryResponse.model_validate(target) if target else None,
            names=sorted(names),
        ),
    )
