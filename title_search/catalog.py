"""Load title catalogs from JSON mapping files."""

import json
from pathlib import Path
from typing import Any, Dict, Union

import structlog

from .core.exceptions import CatalogError

logger = structlog.get_logger(__name__)


def load_catalog(path: Union[str, Path]) -> Dict[str, Dict[str, Any]]:
    """
    Read a catalog mapping from a JSON file.

    The file holds one object keyed by content key, each value being the
    metadata record for that title, e.g.
    ``{"urn:dece:cid:...": {"parentName": "Heat", "contentId": "..."}}``.

    Args:
        path: Location of the JSON file

    Returns:
        Mapping of content key to metadata record

    Raises:
        CatalogError: If the file is missing, not JSON, or not a mapping
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            catalog = json.load(f)
    except FileNotFoundError as e:
        raise CatalogError(f"Catalog file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"Catalog file is not valid JSON: {path}: {e}") from e

    if not isinstance(catalog, dict):
        raise CatalogError(
            f"Catalog must be a JSON object, got {type(catalog).__name__}: {path}"
        )

    records = {}
    for key, record in catalog.items():
        # Non-object records carry no metadata to return.
        if isinstance(record, dict):
            records[key] = record
        else:
            logger.warning("Skipping malformed catalog record", content_key=key)

    logger.info("Catalog loaded", path=str(path), total_records=len(records))
    return records
