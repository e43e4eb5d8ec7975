"""Estimate output models for the AquaCost estimation engine."""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, PlainSerializer

from aquacost.models.enums import SystemType

CENT = Decimal("0.01")

# Exact currency amount; JSON carries it as a plain number
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

# Display order of line items. Totals are summed in this order.
LINE_ITEMS: tuple[str, ...] = (
    "gutter_cost",
    "piping_cost",
    "tank_cost",
    "filter_cost",
    "pump_cost",
    "hvac_unit_cost",
    "misc_cost",
    "pressure_tank_cost",
    "excavation_cost",
)

LINE_ITEM_LABELS: dict[str, str] = {
    "gutter_cost": "Gutters & Downspouts",
    "piping_cost": "Piping & Fittings",
    "tank_cost": "Storage Tank",
    "filter_cost": "Filtration & Treatment",
    "pump_cost": "Pump System",
    "hvac_unit_cost": "HVAC Unit Connections",
    "misc_cost": "Miscellaneous & Permits",
    "pressure_tank_cost": "Pressure Tank",
    "excavation_cost": "Excavation (Underground Tank)",
}

MISC_COST_NOTES: dict[SystemType, str] = {
    SystemType.RAINWATER: (
        "Includes valves, unions, brackets, electrical connections, "
        "and permitting/inspection fees."
    ),
    SystemType.HVAC: (
        "Includes mounting brackets, valves, overflow protection, electrical "
        "connections, and permitting for plumbing tie-ins."
    ),
}


class CostBreakdown(BaseModel):
    """Itemized installed cost, in USD, rounded to whole cents.

    Optional items are ``None`` when they do not apply to the system or the
    corresponding option was not selected.
    """

    tank_cost: Money
    piping_cost: Money
    filter_cost: Money
    pump_cost: Money
    misc_cost: Money
    total: Money
    gutter_cost: Money | None = None
    pressure_tank_cost: Money | None = None
    excavation_cost: Money | None = None
    hvac_unit_cost: Money | None = None

    def line_items(self) -> dict[str, Decimal]:
        """Present line items in display order, excluding the total."""
        items: dict[str, Decimal] = {}
        for name in LINE_ITEMS:
            value = getattr(self, name)
            if value is not None:
                items[name] = value
        return items


class CalculatorResult(BaseModel):
    """Complete result of a single estimate."""

    system_type: SystemType
    annual_water_collection: float
    tank_size: float
    breakdown: CostBreakdown

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat dict of display strings for the results card.

        Every currency and volume figure is shown as a ±10% range.
        """
        from aquacost.formatting import format_currency_range, format_number_range

        return {
            "system_type": self.system_type.value,
            "total_cost_range_formatted": format_currency_range(float(self.breakdown.total)),
            "annual_water_collection_formatted": format_number_range(
                self.annual_water_collection
            ),
            "tank_size_formatted": format_number_range(self.tank_size),
            "line_items": [
                {
                    "name": name,
                    "label": LINE_ITEM_LABELS[name],
                    "cost_range_formatted": format_currency_range(float(value)),
                }
                for name, value in self.breakdown.line_items().items()
                if value > 0
            ],
            "misc_cost_note": MISC_COST_NOTES[self.system_type],
        }
