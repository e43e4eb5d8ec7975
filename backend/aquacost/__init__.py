"""AquaCost water-reuse cost estimation engine.

Usage::

    from aquacost import estimate_rainwater_collection_cost, validate_rainwater_form

    errors = validate_rainwater_form(form)
    if not errors:
        result = estimate_rainwater_collection_cost(2000, 32, 100, roof_type="metal")
"""

from aquacost.calculator import (
    estimate_hvac_condensate_system_cost,
    estimate_rainwater_collection_cost,
    validate_hvac_form,
    validate_rainwater_form,
)
from aquacost.data.catalog import MaterialCatalog, MaterialRate
from aquacost.data.loader import load_catalog
from aquacost.data.seed import DEFAULT_CATALOG
from aquacost.engine import EstimationEngine
from aquacost.exceptions import AquaCostError, CatalogError, CostCompositionError
from aquacost.factory import create_default_engine
from aquacost.models.enums import (
    GutterMaterial,
    HVACPipingMaterial,
    HVACPumpType,
    HVACTankType,
    PumpSize,
    RainwaterPipingMaterial,
    RoofType,
    SystemType,
    TankMaterial,
    UnitBasis,
)
from aquacost.models.inputs import HVACInput, RainwaterInput
from aquacost.models.result import CalculatorResult, CostBreakdown

__all__ = [
    "DEFAULT_CATALOG",
    "AquaCostError",
    "CalculatorResult",
    "CatalogError",
    "CostBreakdown",
    "CostCompositionError",
    "EstimationEngine",
    "GutterMaterial",
    "HVACInput",
    "HVACPipingMaterial",
    "HVACPumpType",
    "HVACTankType",
    "MaterialCatalog",
    "MaterialRate",
    "PumpSize",
    "RainwaterInput",
    "RainwaterPipingMaterial",
    "RoofType",
    "SystemType",
    "TankMaterial",
    "UnitBasis",
    "create_default_engine",
    "estimate_hvac_condensate_system_cost",
    "estimate_rainwater_collection_cost",
    "load_catalog",
    "validate_hvac_form",
    "validate_rainwater_form",
]
