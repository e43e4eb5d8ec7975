"""Factory functions for creating pre-configured EstimationEngine instances."""

from __future__ import annotations

from pathlib import Path

from aquacost.data.loader import load_catalog
from aquacost.engine import EstimationEngine


def create_default_engine(catalog_path: str | Path | None = None) -> EstimationEngine:
    """Create an EstimationEngine wired up with the active catalog.

    The catalog comes from ``catalog_path`` when given, otherwise from the
    file named by ``AQUACOST_CATALOG_PATH``, otherwise the built-in default.

    Raises:
        CatalogError: If a catalog file is given but cannot be loaded.

    Example::

        from aquacost import create_default_engine

        engine = create_default_engine()
        result = engine.estimate_rainwater(inputs)
    """
    return EstimationEngine(load_catalog(catalog_path))
