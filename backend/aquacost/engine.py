"""Core estimation engine for the AquaCost water-reuse cost calculator.

The EstimationEngine turns validated inputs into a CalculatorResult:

1. **Volume model**: Annual yield from roof runoff or HVAC condensate, and
   tank auto-sizing when no storage size is given.
2. **Cost composition**: Each line item is a catalog midpoint, scaled by
   piping length, tank capacity or unit count according to the rate's unit
   basis.
3. **Misc allowance**: Fittings, electrical tie-ins and permitting as a
   fraction of the core equipment cost. Optional add-ons (pressure tank,
   excavation) are flat installed prices outside this base.
4. **Aggregation**: Sum present line items into the total and check the
   breakdown is internally consistent.

Currency is computed in `Decimal` and each line item is rounded to whole
cents, so totals and option differences are exact.

Inputs are assumed to have passed validation. The engine does not check
them again, so malformed values may produce meaningless figures.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Any

from aquacost.exceptions import CatalogError, CostCompositionError
from aquacost.models.enums import SystemType, UnitBasis
from aquacost.models.result import CENT, LINE_ITEMS, CalculatorResult, CostBreakdown
from aquacost.validation import validate_hvac_form, validate_rainwater_form
from aquacost.volume import condensate_annual_gallons, rainwater_annual_gallons, size_tank

if TYPE_CHECKING:
    from aquacost.data.catalog import FilterRates, MaterialCatalog, MaterialRate
    from aquacost.models.inputs import HVACInput, RainwaterInput

logger = logging.getLogger(__name__)

ENGINE_VERSION = "0.1.0"


class EstimationEngine:
    """Estimation engine bound to one material catalog.

    Args:
        catalog: The rate catalog providing material ranges, physical
            constants and policy percentages.

    Example::

        from aquacost.data.seed import DEFAULT_CATALOG

        engine = EstimationEngine(DEFAULT_CATALOG)
        errors = engine.validate_rainwater(form)
        if not errors:
            result = engine.estimate_rainwater(RainwaterInput.model_validate(form))
    """

    def __init__(self, catalog: MaterialCatalog) -> None:
        self._catalog = catalog

    @property
    def catalog(self) -> MaterialCatalog:
        return self._catalog

    def validate_rainwater(self, raw: Any) -> list[str]:
        return validate_rainwater_form(raw, self._catalog)

    def validate_hvac(self, raw: Any) -> list[str]:
        return validate_hvac_form(raw, self._catalog)

    def estimate_rainwater(self, inputs: RainwaterInput) -> CalculatorResult:
        """Estimate a rooftop rainwater harvesting system.

        Returns:
            Annual collection, tank size and an itemized breakdown with
            gutter, piping, tank, filter, pump and misc costs, plus pressure
            tank and excavation when selected.

        Raises:
            CatalogError: If a catalog rate has an unsupported unit basis.
            CostCompositionError: If the breakdown does not add up.
        """
        rates = self._catalog.rainwater
        annual_gallons = rainwater_annual_gallons(
            roof_area_sqft=inputs.roof_area_sqft,
            annual_rainfall_inches=inputs.annual_rainfall_inches,
            roof_type=inputs.roof_type,
            catalog=self._catalog,
        )
        tank_size = size_tank(annual_gallons, inputs.storage_gallons, rates.tank_sizing)

        length = _decimal(inputs.piping_length_feet)
        # Gutters run along the same measured length as the piping
        items: dict[str, Decimal] = {
            "gutter_cost": _to_cents(
                length * _decimal(rates.gutters[inputs.gutter_material].midpoint)
            ),
            "piping_cost": _to_cents(
                length * _decimal(rates.piping[inputs.piping_material].midpoint)
            ),
            "tank_cost": _tank_cost(
                rates.tanks[inputs.tank_material], tank_size, inputs.tank_material
            ),
            "filter_cost": _filter_cost(rates.filters, potable=inputs.potable),
            "pump_cost": _flat_cost(rates.pumps[inputs.pump_size]),
        }
        items["misc_cost"] = self._misc_cost(items)
        if inputs.include_pressure_tank:
            items["pressure_tank_cost"] = _flat_cost(rates.pressure_tank)
        if inputs.include_excavation:
            items["excavation_cost"] = _flat_cost(rates.excavation)

        return self._aggregate(SystemType.RAINWATER, annual_gallons, tank_size, items)

    def estimate_hvac(self, inputs: HVACInput) -> CalculatorResult:
        """Estimate an HVAC condensate recovery system.

        Raises:
            CatalogError: If a catalog rate has an unsupported unit basis.
            CostCompositionError: If the breakdown does not add up.
        """
        rates = self._catalog.hvac
        annual_gallons = condensate_annual_gallons(
            num_units=inputs.num_units,
            tons_per_unit=inputs.tons_per_unit,
            days_per_year=inputs.days_per_year,
            catalog=self._catalog,
        )
        tank_size = size_tank(annual_gallons, inputs.storage_gallons, rates.tank_sizing)

        items: dict[str, Decimal] = {
            "piping_cost": _to_cents(
                _decimal(inputs.piping_length_feet)
                * _decimal(rates.piping[inputs.piping_material].midpoint)
            ),
            "tank_cost": _tank_cost(rates.tanks[inputs.tank_type], tank_size, inputs.tank_type),
            "filter_cost": _filter_cost(rates.filters, potable=inputs.potable),
            "pump_cost": _flat_cost(rates.pumps[inputs.pump_type]),
            "hvac_unit_cost": _to_cents(
                inputs.num_units * _decimal(rates.unit_connection.midpoint)
            ),
        }
        items["misc_cost"] = self._misc_cost(items)

        return self._aggregate(SystemType.HVAC, annual_gallons, tank_size, items)

    def _misc_cost(self, items: dict[str, Decimal]) -> Decimal:
        core = sum(items.values(), Decimal(0))
        return _to_cents(_decimal(self._catalog.misc_cost_fraction) * core)

    @staticmethod
    def _aggregate(
        system_type: SystemType,
        annual_gallons: float,
        tank_size: float,
        items: dict[str, Decimal],
    ) -> CalculatorResult:
        """Sum line items into a total and assemble the result."""
        unknown = set(items) - set(LINE_ITEMS)
        if unknown:
            msg = f"Unknown line items: {', '.join(sorted(unknown))}"
            raise CostCompositionError(msg)

        total = sum((items[name] for name in LINE_ITEMS if name in items), Decimal(0))
        breakdown = CostBreakdown(**items, total=total)

        summed = sum(breakdown.line_items().values(), Decimal(0))
        if summed != breakdown.total:
            msg = f"Breakdown total {breakdown.total} does not match line items sum {summed}"
            raise CostCompositionError(msg)

        logger.debug(
            "%s estimate: %.0f gal/yr, tank %.0f gal, total $%s",
            system_type.value,
            annual_gallons,
            tank_size,
            total,
        )
        return CalculatorResult(
            system_type=system_type,
            annual_water_collection=annual_gallons,
            tank_size=tank_size,
            breakdown=breakdown,
        )


def _decimal(value: float) -> Decimal:
    # str() keeps the shortest repr rather than the binary expansion
    return Decimal(str(value))


def _to_cents(amount: Decimal) -> Decimal:
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def _flat_cost(rate: MaterialRate) -> Decimal:
    return _to_cents(_decimal(rate.midpoint))


def _tank_cost(rate: MaterialRate, tank_size: float, tank: str) -> Decimal:
    if rate.unit_basis == UnitBasis.PER_GALLON:
        return _to_cents(_decimal(tank_size) * _decimal(rate.midpoint))
    if rate.unit_basis == UnitBasis.FLAT:
        return _flat_cost(rate)
    msg = f"Tank '{tank}' has unsupported unit basis '{rate.unit_basis}'"
    raise CatalogError(msg)


def _filter_cost(filters: FilterRates, *, potable: bool) -> Decimal:
    if potable:
        return _flat_cost(filters.potable)
    return _flat_cost(filters.baseline)
