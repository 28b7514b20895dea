"""Home page composition service.

Orders the active home sections and resolves each one against a catalog
snapshot: slider sections through the section filter engine, the tabbed
section through the ranking engine. Results are capped for layout.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union
from urllib.parse import quote

import structlog

from storefront.config import settings
from storefront.core.exceptions import NotFoundError
from storefront.models.catalog import CatalogSnapshot
from storefront.models.product import Product
from storefront.models.section import (
    FILTER_CATEGORY,
    SECTION_TYPE_SLIDER,
    SECTION_TYPE_TABBED,
    HomeSection,
)
from storefront.services.category_service import CategoryTree
from storefront.services.display import cap
from storefront.services.ranking_service import DEFAULT_TAB, ProductTab, rank_for_tab
from storefront.services.section_service import resolve_section_products

logger = structlog.get_logger(__name__)

PRODUCTS_PATH = "/products"


@dataclass
class ResolvedSection:
    """A section descriptor together with the products it displays."""

    section: HomeSection
    products: List[Product]
    view_all_link: Optional[str] = None
    active_tab: Optional[ProductTab] = None
    tabs: List[ProductTab] = field(default_factory=list)


def view_all_link(section: HomeSection) -> str:
    """Link to the full product listing behind a section.

    Category sections link to the listing filtered by their (URL-encoded)
    filter value; everything else links to the unfiltered listing.
    """
    if section.filter_type == FILTER_CATEGORY:
        return f"{PRODUCTS_PATH}?category={quote(section.filter_value or '', safe='')}"
    return PRODUCTS_PATH


class HomeService:
    """Resolves home page sections against one catalog snapshot."""

    def __init__(
        self,
        snapshot: CatalogSnapshot,
        section_limit: Optional[int] = None,
        tab_limit: Optional[int] = None,
        default_tab: Union[ProductTab, str, None] = None,
    ):
        """Initialize home service.

        Unset arguments come from application settings.

        Args:
            snapshot: Read-only catalog snapshot
            section_limit: Display cap for slider sections
            tab_limit: Display cap for tab views
            default_tab: Tab shown when none (or an unknown one) is requested
        """
        self.snapshot = snapshot
        self.section_limit = section_limit if section_limit is not None else settings.SECTION_DISPLAY_LIMIT
        self.tab_limit = tab_limit if tab_limit is not None else settings.TAB_DISPLAY_LIMIT
        self.default_tab = (
            ProductTab.parse(default_tab if default_tab is not None else settings.DEFAULT_TAB)
            or DEFAULT_TAB
        )
        self.tree = CategoryTree(snapshot.categories)
        self.logger = logger.bind(service="home_service")

    def active_sections(self) -> List[HomeSection]:
        """Active sections ordered by sort_order (ties keep config order)."""
        return sorted(
            (s for s in self.snapshot.sections if s.is_active),
            key=lambda s: s.sort_order,
        )

    def get_section(self, section_id: str) -> HomeSection:
        """Look up a configured section by id.

        Raises:
            NotFoundError: If no section has this id
        """
        for section in self.snapshot.sections:
            if section.id == section_id:
                return section
        raise NotFoundError("Section", section_id)

    def section_products(self, section: HomeSection, limit: Optional[int] = None) -> List[Product]:
        """Filtered and capped products for a slider section."""
        products = resolve_section_products(
            self.snapshot.products,
            self.snapshot.categories,
            section,
            tree=self.tree,
        )
        return cap(products, limit if limit is not None else self.section_limit)

    def tab_products(self, tab: Union[ProductTab, str], limit: Optional[int] = None) -> List[Product]:
        """Ranked and capped products for a tab, over the full catalog."""
        ranked = rank_for_tab(self.snapshot.products, self.snapshot.orders, tab)
        return cap(ranked, limit if limit is not None else self.tab_limit)

    def resolve_section(
        self,
        section: HomeSection,
        active_tab: Union[ProductTab, str, None] = None,
    ) -> ResolvedSection:
        """Resolve one section according to its display type."""
        if section.type == SECTION_TYPE_TABBED:
            tab = ProductTab.parse(active_tab) or self.default_tab
            return ResolvedSection(
                section=section,
                products=self.tab_products(tab),
                active_tab=tab,
                tabs=ProductTab.ordered(),
            )

        return ResolvedSection(
            section=section,
            products=self.section_products(section),
            view_all_link=view_all_link(section),
        )

    def build_home(self, active_tab: Union[ProductTab, str, None] = None) -> List[ResolvedSection]:
        """Resolve every active section in display order.

        Slider sections with no products are left out and unknown section
        types are skipped. The tabbed section is kept even when its tab is
        empty so the tab bar still renders.
        """
        self.logger.info(
            "building_home",
            sections=len(self.snapshot.sections),
            products=len(self.snapshot.products),
            active_tab=getattr(active_tab, "value", active_tab),
        )

        resolved: List[ResolvedSection] = []
        for section in self.active_sections():
            if section.type not in (SECTION_TYPE_SLIDER, SECTION_TYPE_TABBED):
                self.logger.debug("section_type_skipped", section_id=section.id, type=section.type)
                continue

            result = self.resolve_section(section, active_tab=active_tab)
            if section.type == SECTION_TYPE_SLIDER and not result.products:
                self.logger.debug("empty_section_skipped", section_id=section.id)
                continue
            resolved.append(result)

        self.logger.info("home_built", sections=len(resolved))
        return resolved
