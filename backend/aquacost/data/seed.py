"""Default material catalog for the AquaCost estimation engine.

Rates are installed-cost ranges for standard materials and labor at U.S.
national averages. Regional pricing varies by site conditions and
contractor; override the catalog with a JSON file to recalibrate.

The condensate yield and tank auto-sizing constants are planning defaults,
not measured values. Supply calibrated figures for a given climate through a
catalog file rather than editing them here.
"""

from aquacost.data.catalog import (
    FilterRates,
    HVACCatalog,
    MaterialCatalog,
    MaterialRate,
    RainwaterCatalog,
    TankSizingPolicy,
)
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

_FOOT = UnitBasis.PER_FOOT
_GALLON = UnitBasis.PER_GALLON
_FLAT = UnitBasis.FLAT

RAINWATER_CATALOG = RainwaterCatalog(
    # Fraction of rainfall that reaches the gutters
    roof_efficiency={
        RoofType.ASPHALT_SHINGLES: 0.85,
        RoofType.METAL: 0.90,
        RoofType.TILE: 0.80,
    },
    gutters={
        GutterMaterial.VINYL: MaterialRate(low=3.0, high=5.0, unit_basis=_FOOT),
        GutterMaterial.ALUMINUM: MaterialRate(low=5.0, high=9.0, unit_basis=_FOOT),
        GutterMaterial.GALVANIZED_STEEL: MaterialRate(low=8.0, high=12.0, unit_basis=_FOOT),
    },
    piping={
        RainwaterPipingMaterial.PVC: MaterialRate(low=1.5, high=3.0, unit_basis=_FOOT),
        RainwaterPipingMaterial.HDPE: MaterialRate(low=2.0, high=4.0, unit_basis=_FOOT),
        RainwaterPipingMaterial.COPPER: MaterialRate(low=6.0, high=10.0, unit_basis=_FOOT),
    },
    tanks={
        TankMaterial.POLYETHYLENE_ABOVE_GROUND: MaterialRate(
            low=0.6, high=1.0, unit_basis=_GALLON,
        ),
        TankMaterial.FIBERGLASS: MaterialRate(low=1.5, high=2.5, unit_basis=_GALLON),
        TankMaterial.CONCRETE_UNDERGROUND: MaterialRate(
            low=2.5, high=5.0, unit_basis=_GALLON,
        ),
    },
    pumps={
        PumpSize.SMALL_BOOSTER: MaterialRate(low=300.0, high=600.0, unit_basis=_FLAT),
        PumpSize.MID_SIZED_WHOLE_HOUSE: MaterialRate(
            low=800.0, high=1500.0, unit_basis=_FLAT,
        ),
    },
    filters=FilterRates(
        # Leaf screens and a first-flush diverter
        baseline=MaterialRate(low=100.0, high=300.0, unit_basis=_FLAT),
        # Sediment and carbon cartridges plus UV sterilizer
        potable=MaterialRate(low=800.0, high=1500.0, unit_basis=_FLAT),
    ),
    pressure_tank=MaterialRate(low=200.0, high=500.0, unit_basis=_FLAT),
    excavation=MaterialRate(low=1000.0, high=5000.0, unit_basis=_FLAT),
    # About four weeks of collection
    tank_sizing=TankSizingPolicy(fraction_of_annual_yield=0.08, minimum_gallons=250.0),
)

HVAC_CATALOG = HVACCatalog(
    daily_gallons_per_ton=3.0,
    piping={
        HVACPipingMaterial.PVC_TUBING: MaterialRate(low=0.5, high=1.5, unit_basis=_FOOT),
        HVACPipingMaterial.FLEXIBLE_CONDENSATE: MaterialRate(
            low=0.7, high=2.0, unit_basis=_FOOT,
        ),
        HVACPipingMaterial.COPPER_RARE: MaterialRate(low=5.0, high=8.0, unit_basis=_FOOT),
    },
    tanks={
        HVACTankType.SMALL_POLY_100_500: MaterialRate(low=150.0, high=700.0, unit_basis=_FLAT),
        HVACTankType.LARGE_POLY_1000_PLUS: MaterialRate(
            low=0.7, high=1.0, unit_basis=_GALLON,
        ),
        HVACTankType.INDOOR_SUMP: MaterialRate(low=200.0, high=500.0, unit_basis=_FLAT),
    },
    pumps={
        HVACPumpType.SMALL_CONDENSATE: MaterialRate(low=80.0, high=200.0, unit_basis=_FLAT),
        HVACPumpType.SUMP_TRANSFER: MaterialRate(low=200.0, high=500.0, unit_basis=_FLAT),
    },
    filters=FilterRates(
        # Inline strainer on the condensate line
        baseline=MaterialRate(low=50.0, high=150.0, unit_basis=_FLAT),
        potable=MaterialRate(low=600.0, high=1200.0, unit_basis=_FLAT),
    ),
    # Drain pan tie-in, trap and cleanout, per air handler
    unit_connection=MaterialRate(low=100.0, high=250.0, unit_basis=_FLAT),
    tank_sizing=TankSizingPolicy(fraction_of_annual_yield=0.08, minimum_gallons=100.0),
)

DEFAULT_CATALOG = MaterialCatalog(
    version="2025.1",
    gallons_per_sqft_inch=0.623,
    misc_cost_fraction=0.15,
    rainwater=RAINWATER_CATALOG,
    hvac=HVAC_CATALOG,
)
