"""Shared helpers for key normalization and timestamp ordering."""

from .normalizer import (
    EPOCH,
    normalize_key,
    timestamp_sort_key,
)


__all__ = [
    "EPOCH",
    "normalize_key",
    "timestamp_sort_key",
]
