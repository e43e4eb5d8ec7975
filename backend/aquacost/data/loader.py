"""Catalog loading.

The default catalog ships with the package. A replacement can be supplied as
a JSON file, either passed explicitly or named by the
``AQUACOST_CATALOG_PATH`` environment variable.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import ValidationError

from aquacost.data.catalog import MaterialCatalog
from aquacost.data.seed import DEFAULT_CATALOG
from aquacost.exceptions import CatalogError

logger = logging.getLogger(__name__)

CATALOG_PATH_ENV = "AQUACOST_CATALOG_PATH"


def load_catalog(path: str | Path | None = None) -> MaterialCatalog:
    """Load the material catalog.

    Lookup order:
    1. ``path``, when given
    2. The file named by ``AQUACOST_CATALOG_PATH``
    3. The built-in default catalog

    Raises:
        CatalogError: If the file cannot be read or does not describe a
            complete, well-formed catalog.
    """
    if path is None:
        env_path = os.environ.get(CATALOG_PATH_ENV, "").strip()
        if not env_path:
            logger.debug("Using built-in catalog %s", DEFAULT_CATALOG.version)
            return DEFAULT_CATALOG
        path = env_path

    catalog_path = Path(path)
    try:
        raw = catalog_path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Could not read catalog file '{catalog_path}': {exc}"
        raise CatalogError(msg) from exc

    try:
        catalog = MaterialCatalog.model_validate_json(raw)
    except ValidationError as exc:
        msg = f"Malformed catalog file '{catalog_path}': {exc}"
        raise CatalogError(msg) from exc

    logger.info("Loaded catalog %s from %s", catalog.version, catalog_path)
    return catalog
