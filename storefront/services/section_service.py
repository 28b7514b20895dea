"""Section filter engine.

Turns a home section descriptor into the subset of the catalog it should
show. Catalog order is preserved; capping happens afterwards.
"""

from typing import Iterable, List, Optional, Sequence

import structlog

from storefront.models.category import Category
from storefront.models.product import Product
from storefront.models.section import (
    FILTER_CATEGORY,
    FILTER_FEATURED,
    FILTER_SALE,
    HomeSection,
)
from storefront.services.category_service import CategoryTree
from storefront.utils.normalizer import normalize_key

logger = structlog.get_logger(__name__)


def filter_by_categories(products: Iterable[Product], allowed: set) -> List[Product]:
    """Keep products whose normalized category label is in ``allowed``."""
    return [p for p in products if normalize_key(p.category) in allowed]


def filter_on_sale(products: Iterable[Product]) -> List[Product]:
    """Keep products with an original price above the current price."""
    return [p for p in products if p.is_on_sale]


def filter_featured(products: Iterable[Product]) -> List[Product]:
    """Keep products flagged as featured."""
    return [p for p in products if p.is_featured]


def resolve_section_products(
    products: Sequence[Product],
    categories: Iterable[Category],
    section: HomeSection,
    tree: Optional[CategoryTree] = None,
) -> List[Product]:
    """Resolve the products a section should display.

    Filter types:
        - "category" with a filter value: products in the category family
          of the value (target plus descendants, or the raw label on a miss)
        - "sale": products whose original price exceeds the current price
        - "featured": featured products
        - anything else, including none: the full catalog. Filter types
          are matched exactly, so "Sale" is not "sale".

    A category section without a filter value is not filtered.

    Args:
        products: Full product catalog
        categories: Category list used for family expansion
        section: Section descriptor (only filter_type/filter_value are read)
        tree: Prebuilt CategoryTree to reuse across sections

    Returns:
        New list of matching products in catalog order

    Raises:
        CategoryCycleError: If family expansion hits a cyclic parent chain
    """
    filter_type = section.filter_type

    if filter_type == FILTER_CATEGORY and section.filter_value:
        if tree is None:
            tree = CategoryTree(categories)
        allowed = tree.family(section.filter_value)
        result = filter_by_categories(products, allowed)
    elif filter_type == FILTER_SALE:
        result = filter_on_sale(products)
    elif filter_type == FILTER_FEATURED:
        result = filter_featured(products)
    else:
        result = list(products)

    logger.debug(
        "section_products_resolved",
        section_id=getattr(section, "id", None),
        filter_type=filter_type,
        filter_value=section.filter_value,
        count=len(result),
    )
    return result
