"""Ranking engine for the featured product tabs.

Each tab derives its own ordering over the full catalog:

- ON SALE: discounted products, catalog order
- NEW PRODUCTS: every product, newest first
- BEST SELLING: products with sales, highest cumulative quantity first

Rankings are recomputed on every call and are not capped here.
"""

import enum
from collections import Counter
from typing import Iterable, List, Optional, Sequence, Union

import structlog

from storefront.models.order import Order
from storefront.models.product import Product
from storefront.utils.normalizer import timestamp_sort_key

logger = structlog.get_logger(__name__)


class ProductTab(str, enum.Enum):
    """The three mutually exclusive tab views."""

    ON_SALE = "ON SALE"
    NEW_PRODUCTS = "NEW PRODUCTS"
    BEST_SELLING = "BEST SELLING"

    @classmethod
    def ordered(cls) -> List["ProductTab"]:
        """Tabs in display order."""
        return [cls.ON_SALE, cls.NEW_PRODUCTS, cls.BEST_SELLING]

    @classmethod
    def parse(cls, label: Union["ProductTab", str, None]) -> Optional["ProductTab"]:
        """Resolve a tab label such as "ON SALE", "on-sale" or "best_selling".

        Returns:
            Matching ProductTab, or None for unknown labels
        """
        if isinstance(label, cls):
            return label
        if label is None:
            return None
        key = " ".join(str(label).replace("-", " ").replace("_", " ").split()).upper()
        for tab in cls:
            if tab.value == key:
                return tab
        return None

    @property
    def slug(self) -> str:
        """URL-friendly form, e.g. "on-sale"."""
        return self.value.lower().replace(" ", "-")


DEFAULT_TAB = ProductTab.ON_SALE


def compute_sales_tally(orders: Iterable[Order]) -> Counter:
    """Sum purchased quantity per line item id across all orders.

    Ids are used verbatim: a variant id that differs from its product id
    gets its own bucket and never counts toward the parent product.
    """
    tally: Counter = Counter()
    for order in orders:
        for item in order.items:
            tally[item.id] += item.quantity
    return tally


def rank_on_sale(products: Sequence[Product]) -> List[Product]:
    return [p for p in products if p.is_on_sale]


def rank_new_products(products: Sequence[Product]) -> List[Product]:
    # sorted() keeps ties in catalog order even with reverse=True
    return sorted(products, key=lambda p: timestamp_sort_key(p.created_at), reverse=True)


def rank_best_selling(products: Sequence[Product], orders: Iterable[Order]) -> List[Product]:
    tally = compute_sales_tally(orders)
    sold = [p for p in products if tally[p.id] > 0]
    return sorted(sold, key=lambda p: tally[p.id], reverse=True)


def rank_for_tab(
    products: Sequence[Product],
    orders: Iterable[Order],
    tab: Union[ProductTab, str],
) -> List[Product]:
    """Rank ``products`` for the selected tab.

    Args:
        products: Product list to rank (the full catalog, not a section subset)
        orders: Order history, read for BEST SELLING only
        tab: ProductTab or a label accepted by ``ProductTab.parse``

    Returns:
        New ranked list; unknown tabs return the products unchanged
    """
    selected = ProductTab.parse(tab)

    if selected is ProductTab.ON_SALE:
        result = rank_on_sale(products)
    elif selected is ProductTab.NEW_PRODUCTS:
        result = rank_new_products(products)
    elif selected is ProductTab.BEST_SELLING:
        result = rank_best_selling(products, orders)
    else:
        logger.warning("unknown_tab", tab=str(tab))
        result = list(products)

    logger.debug(
        "tab_ranked",
        tab=selected.value if selected else str(tab),
        candidates=len(products),
        count=len(result),
    )
    return result
