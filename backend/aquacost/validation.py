"""Form validation for estimate requests.

Validation never raises. Each function returns a list of human-readable
messages, one per invalid field, in form order; an empty list means the
record can be estimated.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ValidationError

from aquacost.data.seed import DEFAULT_CATALOG
from aquacost.models.inputs import (
    MAX_ANNUAL_RAINFALL_INCHES,
    MAX_NUM_UNITS,
    MAX_PIPING_LENGTH_FEET,
    MAX_ROOF_AREA_SQFT,
    MAX_STORAGE_GALLONS,
    MAX_TONS_PER_UNIT,
    HVACInput,
    RainwaterInput,
)

if TYPE_CHECKING:
    from aquacost.data.catalog import MaterialCatalog

_NOT_A_MAPPING = "input must be a mapping of field names to values"

_BOOLEAN = "must be true or false"

_RAINWATER_NUMERIC_MESSAGES: dict[str, str] = {
    "roof_area_sqft": "roof_area_sqft must be a positive number",
    "annual_rainfall_inches": "annual_rainfall_inches must be a positive number",
    "piping_length_feet": "piping_length_feet must be a non-negative number",
    "storage_gallons": "storage_gallons must be a non-negative number when provided",
}

_HVAC_NUMERIC_MESSAGES: dict[str, str] = {
    "num_units": "num_units must be a whole number of at least 1",
    "tons_per_unit": "tons_per_unit must be a positive number",
    "days_per_year": "days_per_year must be a whole number between 1 and 365",
    "piping_length_feet": "piping_length_feet must be a non-negative number",
    "storage_gallons": "storage_gallons must be a non-negative number when provided",
}

_PIPING_TOO_LONG = f"piping_length_feet must be at most {MAX_PIPING_LENGTH_FEET:,} feet"
_STORAGE_TOO_LARGE = f"storage_gallons must be at most {MAX_STORAGE_GALLONS:,} gallons"

_RAINWATER_LIMIT_MESSAGES: dict[str, str] = {
    "roof_area_sqft": f"roof_area_sqft must be at most {MAX_ROOF_AREA_SQFT:,} square feet",
    "annual_rainfall_inches": (
        f"annual_rainfall_inches must be at most {MAX_ANNUAL_RAINFALL_INCHES:,} inches"
    ),
    "piping_length_feet": _PIPING_TOO_LONG,
    "storage_gallons": _STORAGE_TOO_LARGE,
}

_HVAC_LIMIT_MESSAGES: dict[str, str] = {
    "num_units": f"num_units must be at most {MAX_NUM_UNITS:,}",
    "tons_per_unit": f"tons_per_unit must be at most {MAX_TONS_PER_UNIT:,}",
    "piping_length_feet": _PIPING_TOO_LONG,
    "storage_gallons": _STORAGE_TOO_LARGE,
}


def _one_of(field: str, keys: Mapping[Any, object]) -> str:
    return f"{field} must be one of: {', '.join(str(k) for k in keys)}"


def _rainwater_messages(catalog: MaterialCatalog) -> dict[str, str]:
    rates = catalog.rainwater
    return {
        **_RAINWATER_NUMERIC_MESSAGES,
        "potable": f"potable {_BOOLEAN}",
        "roof_type": _one_of("roof_type", rates.roof_efficiency),
        "gutter_material": _one_of("gutter_material", rates.gutters),
        "piping_material": _one_of("piping_material", rates.piping),
        "tank_material": _one_of("tank_material", rates.tanks),
        "pump_size": _one_of("pump_size", rates.pumps),
        "include_excavation": f"include_excavation {_BOOLEAN}",
        "include_pressure_tank": f"include_pressure_tank {_BOOLEAN}",
    }


def _hvac_messages(catalog: MaterialCatalog) -> dict[str, str]:
    rates = catalog.hvac
    return {
        **_HVAC_NUMERIC_MESSAGES,
        "potable": f"potable {_BOOLEAN}",
        "piping_material": _one_of("piping_material", rates.piping),
        "tank_type": _one_of("tank_type", rates.tanks),
        "pump_type": _one_of("pump_type", rates.pumps),
    }


def _collect_errors(
    model: type[BaseModel],
    raw: Any,
    messages: dict[str, str],
    limit_messages: dict[str, str],
) -> list[str]:
    if not isinstance(raw, Mapping):
        return [_NOT_A_MAPPING]

    try:
        model.model_validate(dict(raw))
    except ValidationError as exc:
        failed: dict[Any, str] = {}
        for err in exc.errors():
            if not err["loc"]:
                continue
            name = err["loc"][0]
            if err["type"] == "less_than_equal" and name in limit_messages:
                failed.setdefault(name, limit_messages[name])
            else:
                failed.setdefault(name, messages[name])
        errors = [failed[name] for name in model.model_fields if name in failed]
        # Model-level failures carry no field location
        return errors or [str(exc)]
    return []


def validate_rainwater_form(
    raw: Any,
    catalog: MaterialCatalog = DEFAULT_CATALOG,
) -> list[str]:
    """Check a raw rainwater form record.

    Numeric fields may be numbers or numeric strings. Option fields left out
    of the record take their default; an unrecognized option value is always
    an error.
    """
    return _collect_errors(
        RainwaterInput, raw, _rainwater_messages(catalog), _RAINWATER_LIMIT_MESSAGES
    )


def validate_hvac_form(
    raw: Any,
    catalog: MaterialCatalog = DEFAULT_CATALOG,
) -> list[str]:
    """Check a raw HVAC condensate form record."""
    return _collect_errors(HVACInput, raw, _hvac_messages(catalog), _HVAC_LIMIT_MESSAGES)
