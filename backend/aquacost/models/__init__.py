"""Domain models for the AquaCost estimation engine."""

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
    "CalculatorResult",
    "CostBreakdown",
    "GutterMaterial",
    "HVACInput",
    "HVACPipingMaterial",
    "HVACPumpType",
    "HVACTankType",
    "PumpSize",
    "RainwaterInput",
    "RainwaterPipingMaterial",
    "RoofType",
    "SystemType",
    "TankMaterial",
    "UnitBasis",
]
