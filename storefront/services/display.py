"""Display capping for product rails."""

from typing import List, Sequence, TypeVar

T = TypeVar("T")


def cap(products: Sequence[T], limit: int) -> List[T]:
    """Return the first ``limit`` items in their current order.

    Args:
        products: Resolved product list
        limit: Maximum number of items to keep (supplied by the caller)

    Returns:
        New list with at most ``limit`` items; empty when limit <= 0
    """
    if limit <= 0:
        return []
    return list(products[:limit])
