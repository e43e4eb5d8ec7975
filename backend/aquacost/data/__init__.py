"""Material catalog layer for the AquaCost estimation engine."""

from aquacost.data.catalog import (
    FilterRates,
    HVACCatalog,
    MaterialCatalog,
    MaterialRate,
    RainwaterCatalog,
    TankSizingPolicy,
)
from aquacost.data.loader import load_catalog
from aquacost.data.seed import DEFAULT_CATALOG

__all__ = [
    "DEFAULT_CATALOG",
    "FilterRates",
    "HVACCatalog",
    "MaterialCatalog",
    "MaterialRate",
    "RainwaterCatalog",
    "TankSizingPolicy",
    "load_catalog",
]
