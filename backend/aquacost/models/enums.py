"""Enums for the AquaCost domain models.

Each enum value doubles as a catalog key, so the string values are the
exact keys a form or API payload must send.
"""

from enum import StrEnum


class SystemType(StrEnum):
    """The two water-reuse systems the engine can estimate."""

    RAINWATER = "rainwater"
    HVAC = "hvac"


class UnitBasis(StrEnum):
    """How a catalog rate scales with quantity."""

    PER_FOOT = "per_foot"
    PER_GALLON = "per_gallon"
    FLAT = "flat"


# ---------------------------------------------------------------------------
# Rainwater harvesting options
# ---------------------------------------------------------------------------


class RoofType(StrEnum):
    """Roof surfaces, each with its own runoff capture efficiency."""

    ASPHALT_SHINGLES = "asphalt_shingles"
    METAL = "metal"
    TILE = "tile"


class GutterMaterial(StrEnum):
    VINYL = "vinyl"
    ALUMINUM = "aluminum"
    GALVANIZED_STEEL = "galvanized_steel"


class RainwaterPipingMaterial(StrEnum):
    PVC = "pvc"
    HDPE = "hdpe"
    COPPER = "copper"


class TankMaterial(StrEnum):
    """Cistern construction for rainwater storage."""

    POLYETHYLENE_ABOVE_GROUND = "polyethylene_above_ground"
    FIBERGLASS = "fiberglass"
    CONCRETE_UNDERGROUND = "concrete_underground"


class PumpSize(StrEnum):
    SMALL_BOOSTER = "small_booster"
    MID_SIZED_WHOLE_HOUSE = "mid_sized_whole_house"


# ---------------------------------------------------------------------------
# HVAC condensate recovery options
# ---------------------------------------------------------------------------


class HVACPipingMaterial(StrEnum):
    PVC_TUBING = "pvc_tubing"
    FLEXIBLE_CONDENSATE = "flexible_condensate"
    COPPER_RARE = "copper_rare"


class HVACTankType(StrEnum):
    """Condensate storage options.

    The small poly tank and the indoor sump are priced as a fixed unit;
    large poly tanks are priced by capacity.
    """

    SMALL_POLY_100_500 = "small_poly_100_500"
    LARGE_POLY_1000_PLUS = "large_poly_1000_plus"
    INDOOR_SUMP = "indoor_sump"


class HVACPumpType(StrEnum):
    SMALL_CONDENSATE = "small_condensate"
    SUMP_TRANSFER = "sump_transfer"
