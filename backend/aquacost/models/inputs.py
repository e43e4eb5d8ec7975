"""Input models for the AquaCost estimation engine.

These carry only typed values. Raw form state (strings typed into inputs,
checkbox state) is parsed by the validator before an estimate is requested.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

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


# Upper bounds well beyond any real building, so yields and costs stay finite
MAX_ROOF_AREA_SQFT = 10_000_000
MAX_ANNUAL_RAINFALL_INCHES = 1_000
MAX_PIPING_LENGTH_FEET = 100_000
MAX_STORAGE_GALLONS = 100_000_000
MAX_NUM_UNITS = 10_000
MAX_TONS_PER_UNIT = 1_000


def _reject_bool(v: Any) -> Any:
    # pydantic's lax mode would read True as 1
    if isinstance(v, bool):
        msg = "expected a number, got a boolean"
        raise ValueError(msg)
    return v


def _blank_to_none(v: Any) -> Any:
    if isinstance(v, str) and not v.strip():
        return None
    return v


class RainwaterInput(BaseModel):
    """Rooftop rainwater harvesting system parameters.

    Option defaults match the calculator form's initial selections.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    roof_area_sqft: float = Field(gt=0, le=MAX_ROOF_AREA_SQFT)
    annual_rainfall_inches: float = Field(gt=0, le=MAX_ANNUAL_RAINFALL_INCHES)
    piping_length_feet: float = Field(ge=0, le=MAX_PIPING_LENGTH_FEET)
    potable: bool = False
    storage_gallons: float | None = Field(default=None, ge=0, le=MAX_STORAGE_GALLONS)
    roof_type: RoofType = RoofType.ASPHALT_SHINGLES
    gutter_material: GutterMaterial = GutterMaterial.ALUMINUM
    piping_material: RainwaterPipingMaterial = RainwaterPipingMaterial.PVC
    tank_material: TankMaterial = TankMaterial.POLYETHYLENE_ABOVE_GROUND
    pump_size: PumpSize = PumpSize.MID_SIZED_WHOLE_HOUSE
    include_excavation: bool = False
    include_pressure_tank: bool = True

    @field_validator(
        "roof_area_sqft",
        "annual_rainfall_inches",
        "piping_length_feet",
        "storage_gallons",
        mode="before",
    )
    @classmethod
    def numbers_must_not_be_bool(cls, v: Any) -> Any:
        return _reject_bool(v)

    @field_validator("storage_gallons", mode="before")
    @classmethod
    def blank_storage_means_auto(cls, v: Any) -> Any:
        return _blank_to_none(v)


class HVACInput(BaseModel):
    """HVAC condensate recovery system parameters."""

    model_config = ConfigDict(allow_inf_nan=False)

    num_units: int = Field(ge=1, le=MAX_NUM_UNITS)
    tons_per_unit: float = Field(gt=0, le=MAX_TONS_PER_UNIT)
    days_per_year: int = Field(ge=1, le=365)
    piping_length_feet: float = Field(ge=0, le=MAX_PIPING_LENGTH_FEET)
    potable: bool = False
    storage_gallons: float | None = Field(default=None, ge=0, le=MAX_STORAGE_GALLONS)
    piping_material: HVACPipingMaterial = HVACPipingMaterial.PVC_TUBING
    tank_type: HVACTankType = HVACTankType.SMALL_POLY_100_500
    pump_type: HVACPumpType = HVACPumpType.SMALL_CONDENSATE

    @field_validator(
        "num_units",
        "tons_per_unit",
        "days_per_year",
        "piping_length_feet",
        "storage_gallons",
        mode="before",
    )
    @classmethod
    def numbers_must_not_be_bool(cls, v: Any) -> Any:
        return _reject_bool(v)

    @field_validator("storage_gallons", mode="before")
    @classmethod
    def blank_storage_means_auto(cls, v: Any) -> Any:
        return _blank_to_none(v)
