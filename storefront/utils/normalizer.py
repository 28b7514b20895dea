"""Normalization utilities for case-insensitive catalog matching and dates.

Products and categories are joined by free-text labels that admins edit by
hand, so every label comparison goes through ``normalize_key``.
"""

from datetime import datetime, timezone
from typing import Any, Optional

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def normalize_key(value: Any) -> str:
    """Lower-case and trim a value for use as a join key.

    Args:
        value: Category name, slug, id, product category label or filter value

    Returns:
        Normalized string, empty for None
    """
    if value is None:
        return ""
    return str(value).strip().lower()


def timestamp_sort_key(value: Optional[datetime]) -> datetime:
    """Sort key for optional timestamps; missing values count as the epoch."""
    return value if value is not None else EPOCH
