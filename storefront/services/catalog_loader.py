"""Load a read-only catalog snapshot from a JSON document."""

from pathlib import Path
from typing import Union

import structlog
from pydantic import ValidationError

from storefront.core.exceptions import CatalogLoadError
from storefront.models.catalog import CatalogSnapshot

logger = structlog.get_logger(__name__)


def load_catalog(path: Union[str, Path, None]) -> CatalogSnapshot:
    """Read and validate a catalog snapshot file.

    Args:
        path: Path to a UTF-8 JSON file; empty or None gives an empty catalog

    Returns:
        Validated CatalogSnapshot

    Raises:
        CatalogLoadError: If the file is missing or unreadable, or its JSON
            does not validate as a snapshot
    """
    if not path:
        logger.info("catalog_path_unset", detail="starting with an empty catalog")
        return CatalogSnapshot()

    file_path = Path(path)
    if not file_path.is_file():
        raise CatalogLoadError(str(file_path), "file not found")

    try:
        raw = file_path.read_bytes()
    except OSError as e:
        raise CatalogLoadError(str(file_path), str(e)) from e

    try:
        snapshot = CatalogSnapshot.model_validate_json(raw)
    except ValidationError as e:
        raise CatalogLoadError(str(file_path), f"{e.error_count()} validation error(s)") from e

    logger.info(
        "catalog_loaded",
        path=str(file_path),
        products=len(snapshot.products),
        categories=len(snapshot.categories),
        orders=len(snapshot.orders),
        sections=len(snapshot.sections),
    )
    return snapshot
