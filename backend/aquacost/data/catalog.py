"""Schema for the material rate catalog.

The catalog is the single home for every rate, physical constant and policy
percentage the engine uses. Cost assembly code reads from it and never
carries its own numbers.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from aquacost.models.enums import (
    GutterMaterial,
    HVACPipingMaterial,
    HVACPumpType,
    HVACTankType,
    PumpSize,
    RainwaterPipingMaterial,
    RoofType,
    TankMaterial,
    UnitBasis,
)


class MaterialRate(BaseModel):
    """Installed cost range for one material or piece of equipment."""

    model_config = ConfigDict(frozen=True)

    low: float = Field(ge=0)
    high: float = Field(ge=0)
    unit_basis: UnitBasis

    @model_validator(mode="after")
    def low_le_high(self) -> MaterialRate:
        if self.low > self.high:
            msg = f"Must satisfy low <= high, got {self.low} <= {self.high}"
            raise ValueError(msg)
        return self

    @property
    def midpoint(self) -> float:
        """Point estimate used by the engine."""
        return (self.low + self.high) / 2


class TankSizingPolicy(BaseModel):
    """Auto-sizing rule used when no storage size is given.

    The tank buffers ``fraction_of_annual_yield`` of the annual collection,
    but is never smaller than ``minimum_gallons``.
    """

    model_config = ConfigDict(frozen=True)

    fraction_of_annual_yield: float = Field(gt=0, le=1)
    minimum_gallons: float = Field(ge=0)


class FilterRates(BaseModel):
    """Baseline screening versus potable-grade treatment."""

    model_config = ConfigDict(frozen=True)

    baseline: MaterialRate
    potable: MaterialRate


def _require_complete(
    table: Mapping[StrEnum, object],
    enum_cls: type[StrEnum],
    table_name: str,
) -> None:
    missing = [member.value for member in enum_cls if member not in table]
    if missing:
        msg = f"{table_name} is missing entries for: {', '.join(missing)}"
        raise ValueError(msg)


def _require_flat(rate: MaterialRate, name: str) -> None:
    if rate.unit_basis != UnitBasis.FLAT:
        msg = f"{name} must be priced flat, got {rate.unit_basis}"
        raise ValueError(msg)


def _require_per_foot(table: Mapping[StrEnum, MaterialRate], table_name: str) -> None:
    for key, rate in table.items():
        if rate.unit_basis != UnitBasis.PER_FOOT:
            msg = f"{table_name}.{key} must be priced per foot, got {rate.unit_basis}"
            raise ValueError(msg)


class RainwaterCatalog(BaseModel):
    """Rates and constants for rooftop rainwater harvesting."""

    model_config = ConfigDict(frozen=True)

    roof_efficiency: dict[RoofType, float]
    gutters: dict[GutterMaterial, MaterialRate]
    piping: dict[RainwaterPipingMaterial, MaterialRate]
    tanks: dict[TankMaterial, MaterialRate]
    pumps: dict[PumpSize, MaterialRate]
    filters: FilterRates
    pressure_tank: MaterialRate
    excavation: MaterialRate
    tank_sizing: TankSizingPolicy

    @model_validator(mode="after")
    def tables_are_complete(self) -> RainwaterCatalog:
        _require_complete(self.roof_efficiency, RoofType, "roof_efficiency")
        _require_complete(self.gutters, GutterMaterial, "gutters")
        _require_complete(self.piping, RainwaterPipingMaterial, "piping")
        _require_complete(self.tanks, TankMaterial, "tanks")
        _require_complete(self.pumps, PumpSize, "pumps")
        for roof_type, efficiency in self.roof_efficiency.items():
            if not 0 < efficiency <= 1:
                msg = f"roof_efficiency for {roof_type} must be in (0, 1], got {efficiency}"
                raise ValueError(msg)
        _require_per_foot(self.gutters, "gutters")
        _require_per_foot(self.piping, "piping")
        for name, rate in (
            ("filters.baseline", self.filters.baseline),
            ("filters.potable", self.filters.potable),
            ("pressure_tank", self.pressure_tank),
            ("excavation", self.excavation),
            *((f"pumps.{k}", v) for k, v in self.pumps.items()),
        ):
            _require_flat(rate, name)
        return self


class HVACCatalog(BaseModel):
    """Rates and constants for HVAC condensate recovery."""

    model_config = ConfigDict(frozen=True)

    daily_gallons_per_ton: float = Field(gt=0)
    piping: dict[HVACPipingMaterial, MaterialRate]
    tanks: dict[HVACTankType, MaterialRate]
    pumps: dict[HVACPumpType, MaterialRate]
    filters: FilterRates
    unit_connection: MaterialRate
    tank_sizing: TankSizingPolicy

    @model_validator(mode="after")
    def tables_are_complete(self) -> HVACCatalog:
        _require_complete(self.piping, HVACPipingMaterial, "piping")
        _require_complete(self.tanks, HVACTankType, "tanks")
        _require_complete(self.pumps, HVACPumpType, "pumps")
        _require_per_foot(self.piping, "piping")
        for name, rate in (
            ("filters.baseline", self.filters.baseline),
            ("filters.potable", self.filters.potable),
            ("unit_connection", self.unit_connection),
            *((f"pumps.{k}", v) for k, v in self.pumps.items()),
        ):
            _require_flat(rate, name)
        return self


class MaterialCatalog(BaseModel):
    """Complete, immutable catalog consumed by the estimation engine."""

    model_config = ConfigDict(frozen=True)

    version: str
    gallons_per_sqft_inch: float = Field(default=0.623, gt=0)
    misc_cost_fraction: float = Field(ge=0)
    rainwater: RainwaterCatalog
    hvac: HVACCatalog
