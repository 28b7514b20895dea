"""Services module for section resolution and ranking.

Every function here is a pure computation over the catalog it is given;
nothing reads global state or mutates its inputs.
"""

from storefront.services.category_service import CategoryTree, resolve_category_family
from storefront.services.section_service import resolve_section_products
from storefront.services.ranking_service import (
    DEFAULT_TAB,
    ProductTab,
    compute_sales_tally,
    rank_for_tab,
)
from storefront.services.display import cap
from storefront.services.home_service import HomeService, ResolvedSection, view_all_link
from storefront.services.catalog_loader import load_catalog

__all__ = [
    "CategoryTree",
    "resolve_category_family",
    "resolve_section_products",
    "DEFAULT_TAB",
    "ProductTab",
    "compute_sales_tally",
    "rank_for_tab",
    "cap",
    "HomeService",
    "ResolvedSection",
    "view_all_link",
    "load_catalog",
]
