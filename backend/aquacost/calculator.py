"""Module-level calculator operations.

These are the four entry points a presentation layer calls: validate a raw
form record, then, only when it produced no errors, estimate with the typed
field values. They share one engine built from the active catalog.
"""

from __future__ import annotations

from functools import cache
from typing import Any

from aquacost.engine import EstimationEngine
from aquacost.factory import create_default_engine
from aquacost.models.enums import (
    GutterMaterial,
    HVACPipingMaterial,
    HVACPumpType,
    HVACTankType,
    PumpSize,
    RainwaterPipingMaterial,
    RoofType,
    TankMaterial,
)
from aquacost.models.inputs import HVACInput, RainwaterInput
from aquacost.models.result import CalculatorResult


@cache
def get_engine() -> EstimationEngine:
    """Return the shared engine, creating it on first use."""
    return create_default_engine()


def validate_rainwater_form(raw: Any) -> list[str]:
    """Validate a raw rainwater form record against the active catalog."""
    return get_engine().validate_rainwater(raw)


def validate_hvac_form(raw: Any) -> list[str]:
    """Validate a raw HVAC form record against the active catalog."""
    return get_engine().validate_hvac(raw)


def estimate_rainwater_collection_cost(
    roof_area_sqft: float,
    annual_rainfall_inches: float,
    piping_length_feet: float,
    potable: bool = False,
    storage_gallons: float | None = None,
    roof_type: RoofType | str = RoofType.ASPHALT_SHINGLES,
    gutter_material: GutterMaterial | str = GutterMaterial.ALUMINUM,
    piping_material: RainwaterPipingMaterial | str = RainwaterPipingMaterial.PVC,
    tank_material: TankMaterial | str = TankMaterial.POLYETHYLENE_ABOVE_GROUND,
    pump_size: PumpSize | str = PumpSize.MID_SIZED_WHOLE_HOUSE,
    include_excavation: bool = False,
    include_pressure_tank: bool = True,
) -> CalculatorResult:
    """Estimate a rainwater harvesting system from validated field values.

    Call :func:`validate_rainwater_form` first; this function does not
    report field errors.
    """
    inputs = RainwaterInput(
        roof_area_sqft=roof_area_sqft,
        annual_rainfall_inches=annual_rainfall_inches,
        piping_length_feet=piping_length_feet,
        potable=potable,
        storage_gallons=storage_gallons,
        roof_type=roof_type,
        gutter_material=gutter_material,
        piping_material=piping_material,
        tank_material=tank_material,
        pump_size=pump_size,
        include_excavation=include_excavation,
        include_pressure_tank=include_pressure_tank,
    )
    return get_engine().estimate_rainwater(inputs)


def estimate_hvac_condensate_system_cost(
    num_units: int,
    tons_per_unit: float,
    days_per_year: int,
    piping_length_feet: float,
    potable: bool = False,
    storage_gallons: float | None = None,
    piping_material: HVACPipingMaterial | str = HVACPipingMaterial.PVC_TUBING,
    tank_type: HVACTankType | str = HVACTankType.SMALL_POLY_100_500,
    pump_type: HVACPumpType | str = HVACPumpType.SMALL_CONDENSATE,
) -> CalculatorResult:
    """Estimate an HVAC condensate recovery system from validated field values."""
    inputs = HVACInput(
        num_units=num_units,
        tons_per_unit=tons_per_unit,
        days_per_year=days_per_year,
        piping_length_feet=piping_length_feet,
        potable=potable,
        storage_gallons=storage_gallons,
        piping_material=piping_material,
        tank_type=tank_type,
        pump_type=pump_type,
    )
    return get_engine().estimate_hvac(inputs)
