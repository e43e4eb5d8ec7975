"""Water volume model: annual yield and tank auto-sizing.

All functions are pure; constants come from the catalog.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aquacost.data.catalog import MaterialCatalog, TankSizingPolicy
    from aquacost.models.enums import RoofType


def rainwater_annual_gallons(
    roof_area_sqft: float,
    annual_rainfall_inches: float,
    roof_type: RoofType,
    catalog: MaterialCatalog,
) -> float:
    """Annual roof runoff captured, in gallons.

    One inch of rain on one square foot yields about 0.623 gallons; the roof
    efficiency accounts for splash, evaporation and absorption losses.
    """
    return (
        roof_area_sqft
        * annual_rainfall_inches
        * catalog.gallons_per_sqft_inch
        * catalog.rainwater.roof_efficiency[roof_type]
    )


def condensate_annual_gallons(
    num_units: int,
    tons_per_unit: float,
    days_per_year: int,
    catalog: MaterialCatalog,
) -> float:
    """Annual HVAC condensate, in gallons."""
    return (
        num_units
        * tons_per_unit
        * days_per_year
        * catalog.hvac.daily_gallons_per_ton
    )


def size_tank(
    annual_gallons: float,
    storage_gallons: float | None,
    policy: TankSizingPolicy,
) -> float:
    """Return the requested storage size, or auto-size from annual yield."""
    if storage_gallons is not None:
        return storage_gallons
    return max(policy.minimum_gallons, annual_gallons * policy.fraction_of_annual_yield)
