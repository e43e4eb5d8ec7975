"""Tests for the material catalog and catalog loading."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest
from pydantic import ValidationError

from aquacost.data.catalog import (
    HVACCatalog,
    MaterialCatalog,
    MaterialRate,
    RainwaterCatalog,
    TankSizingPolicy,
)
from aquacost.data.loader import CATALOG_PATH_ENV, load_catalog
from aquacost.data.seed import DEFAULT_CATALOG
from aquacost.exceptions import CatalogError
from aquacost.models.enums import (
    GutterMaterial,
    HVACTankType,
    PumpSize,
    RoofType,
    TankMaterial,
    UnitBasis,
)

if TYPE_CHECKING:
    from pathlib import Path

# ---------------------------------------------------------------------------
# MaterialRate
# ---------------------------------------------------------------------------


class TestMaterialRate:
    def test_midpoint_is_average_of_range(self) -> None:
        rate = MaterialRate(low=5.0, high=9.0, unit_basis=UnitBasis.PER_FOOT)
        assert rate.midpoint == 7.0

    def test_equal_bounds(self) -> None:
        rate = MaterialRate(low=100.0, high=100.0, unit_basis=UnitBasis.FLAT)
        assert rate.midpoint == 100.0

    def test_low_greater_than_high_raises(self) -> None:
        with pytest.raises(ValidationError, match="low <= high"):
            MaterialRate(low=10.0, high=5.0, unit_basis=UnitBasis.FLAT)

    def test_negative_rate_raises(self) -> None:
        with pytest.raises(ValidationError):
            MaterialRate(low=-1.0, high=5.0, unit_basis=UnitBasis.FLAT)

    def test_unknown_unit_basis_raises(self) -> None:
        with pytest.raises(ValidationError):
            MaterialRate(low=1.0, high=2.0, unit_basis="per_yard")  # type: ignore[arg-type]

    def test_is_frozen(self) -> None:
        rate = MaterialRate(low=1.0, high=2.0, unit_basis=UnitBasis.FLAT)
        with pytest.raises(ValidationError):
            rate.low = 0.5  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Default catalog integrity
# ---------------------------------------------------------------------------


class TestDefaultCatalog:
    def test_roof_efficiencies(self) -> None:
        efficiency = DEFAULT_CATALOG.rainwater.roof_efficiency
        assert efficiency[RoofType.ASPHALT_SHINGLES] == 0.85
        assert efficiency[RoofType.METAL] == 0.90
        assert efficiency[RoofType.TILE] == 0.80

    def test_runoff_conversion_constant(self) -> None:
        assert DEFAULT_CATALOG.gallons_per_sqft_inch == 0.623

    def test_gutter_rates(self) -> None:
        gutters = DEFAULT_CATALOG.rainwater.gutters
        assert gutters[GutterMaterial.VINYL].midpoint == 4.0
        assert gutters[GutterMaterial.ALUMINUM].midpoint == 7.0
        assert gutters[GutterMaterial.GALVANIZED_STEEL].midpoint == 10.0

    def test_rainwater_tanks_priced_per_gallon(self) -> None:
        for rate in DEFAULT_CATALOG.rainwater.tanks.values():
            assert rate.unit_basis == UnitBasis.PER_GALLON

    def test_hvac_tank_unit_bases(self) -> None:
        tanks = DEFAULT_CATALOG.hvac.tanks
        assert tanks[HVACTankType.SMALL_POLY_100_500].unit_basis == UnitBasis.FLAT
        assert tanks[HVACTankType.INDOOR_SUMP].unit_basis == UnitBasis.FLAT
        assert tanks[HVACTankType.LARGE_POLY_1000_PLUS].unit_basis == UnitBasis.PER_GALLON

    def test_option_rates(self) -> None:
        rates = DEFAULT_CATALOG.rainwater
        assert rates.pressure_tank.midpoint == 350.0
        assert rates.excavation.midpoint == 3000.0
        assert rates.pumps[PumpSize.SMALL_BOOSTER].midpoint == 450.0

    def test_potable_filtration_costs_more_than_baseline(self) -> None:
        for filters in (DEFAULT_CATALOG.rainwater.filters, DEFAULT_CATALOG.hvac.filters):
            assert filters.potable.midpoint > filters.baseline.midpoint

    def test_policy_constants_present(self) -> None:
        assert 0 < DEFAULT_CATALOG.misc_cost_fraction < 1
        assert DEFAULT_CATALOG.hvac.daily_gallons_per_ton > 0
        assert DEFAULT_CATALOG.rainwater.tank_sizing.minimum_gallons > 0

    def test_is_frozen(self) -> None:
        with pytest.raises(ValidationError):
            DEFAULT_CATALOG.misc_cost_fraction = 0.5  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Catalog validation
# ---------------------------------------------------------------------------


def _rainwater_data() -> dict[str, object]:
    return DEFAULT_CATALOG.rainwater.model_dump(mode="json")


class TestCatalogValidation:
    def test_missing_material_entry_raises(self) -> None:
        data = _rainwater_data()
        del data["tanks"][TankMaterial.FIBERGLASS.value]  # type: ignore[attr-defined]
        with pytest.raises(ValidationError, match="tanks is missing entries for: fiberglass"):
            RainwaterCatalog.model_validate(data)

    def test_missing_roof_efficiency_raises(self) -> None:
        data = _rainwater_data()
        del data["roof_efficiency"]["tile"]  # type: ignore[attr-defined]
        with pytest.raises(ValidationError, match="roof_efficiency is missing"):
            RainwaterCatalog.model_validate(data)

    def test_roof_efficiency_above_one_raises(self) -> None:
        data = _rainwater_data()
        data["roof_efficiency"]["metal"] = 1.2  # type: ignore[index]
        with pytest.raises(ValidationError, match="must be in"):
            RainwaterCatalog.model_validate(data)

    def test_per_gallon_pump_raises(self) -> None:
        data = _rainwater_data()
        data["pumps"]["small_booster"]["unit_basis"] = "per_gallon"  # type: ignore[index]
        with pytest.raises(ValidationError, match="must be priced flat"):
            RainwaterCatalog.model_validate(data)

    def test_flat_gutter_rate_raises(self) -> None:
        data = DEFAULT_CATALOG.model_dump(mode="json")
        data["rainwater"]["gutters"]["aluminum"] = {
            "low": 500.0,
            "high": 900.0,
            "unit_basis": "flat",
        }
        with pytest.raises(ValidationError, match="gutters.aluminum must be priced per foot"):
            MaterialCatalog.model_validate(data)

    def test_per_gallon_rainwater_piping_raises(self) -> None:
        data = _rainwater_data()
        data["piping"]["hdpe"]["unit_basis"] = "per_gallon"  # type: ignore[index]
        with pytest.raises(ValidationError, match="piping.hdpe must be priced per foot"):
            RainwaterCatalog.model_validate(data)

    def test_flat_hvac_piping_raises(self) -> None:
        data = DEFAULT_CATALOG.hvac.model_dump(mode="json")
        data["piping"]["copper_rare"]["unit_basis"] = "flat"
        with pytest.raises(ValidationError, match="piping.copper_rare must be priced per foot"):
            HVACCatalog.model_validate(data)

    def test_hvac_yield_must_be_positive(self) -> None:
        data = DEFAULT_CATALOG.hvac.model_dump(mode="json")
        data["daily_gallons_per_ton"] = 0
        with pytest.raises(ValidationError):
            HVACCatalog.model_validate(data)

    def test_tank_sizing_fraction_bounds(self) -> None:
        with pytest.raises(ValidationError):
            TankSizingPolicy(fraction_of_annual_yield=0.0, minimum_gallons=100.0)
        with pytest.raises(ValidationError):
            TankSizingPolicy(fraction_of_annual_yield=1.5, minimum_gallons=100.0)

    def test_json_round_trip(self) -> None:
        restored = MaterialCatalog.model_validate_json(DEFAULT_CATALOG.model_dump_json())
        assert restored == DEFAULT_CATALOG


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------


def _write_catalog(path: Path, **overrides: object) -> Path:
    data = DEFAULT_CATALOG.model_dump(mode="json")
    data.update(overrides)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestLoadCatalog:
    def test_default_when_env_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(CATALOG_PATH_ENV, raising=False)
        assert load_catalog() is DEFAULT_CATALOG

    def test_blank_env_means_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(CATALOG_PATH_ENV, "  ")
        assert load_catalog() is DEFAULT_CATALOG

    def test_explicit_path(self, tmp_path: Path) -> None:
        path = _write_catalog(tmp_path / "catalog.json", version="test-1", misc_cost_fraction=0.2)
        catalog = load_catalog(path)
        assert catalog.version == "test-1"
        assert catalog.misc_cost_fraction == 0.2

    def test_path_from_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = _write_catalog(tmp_path / "regional.json", version="gulf-coast")
        monkeypatch.setenv(CATALOG_PATH_ENV, str(path))
        assert load_catalog().version == "gulf-coast"

    def test_missing_file_raises_catalog_error(self, tmp_path: Path) -> None:
        with pytest.raises(CatalogError, match="Could not read catalog file"):
            load_catalog(tmp_path / "nope.json")

    def test_malformed_file_raises_catalog_error(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text('{"version": "x"}', encoding="utf-8")
        with pytest.raises(CatalogError, match="Malformed catalog file"):
            load_catalog(path)

    def test_invalid_json_raises_catalog_error(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("not json", encoding="utf-8")
        with pytest.raises(CatalogError):
            load_catalog(path)
