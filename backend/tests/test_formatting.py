"""Tests for formatting helpers and CalculatorResult.to_summary_dict."""

from __future__ import annotations

from aquacost.formatting import (
    display_range,
    format_currency,
    format_currency_range,
    format_number_range,
)
from aquacost.models.enums import SystemType
from aquacost.models.result import CalculatorResult, CostBreakdown

# ---------- Helpers ----------


def _build_result(system_type: SystemType = SystemType.RAINWATER) -> CalculatorResult:
    return CalculatorResult(
        system_type=system_type,
        annual_water_collection=35_000.0,
        tank_size=2_800.0,
        breakdown=CostBreakdown(
            gutter_cost=700.0,
            piping_cost=200.0,
            tank_cost=2_200.0,
            filter_cost=200.0,
            pump_cost=1_100.0,
            misc_cost=600.0,
            excavation_cost=0.0,
            total=5_000.0,
        ),
    )


# ---------- format_currency ----------


class TestFormatCurrency:
    def test_whole_dollars_with_commas(self) -> None:
        assert format_currency(1_234_567) == "$1,234,567"

    def test_rounds_cents_away(self) -> None:
        assert format_currency(4_410.4) == "$4,410"

    def test_zero(self) -> None:
        assert format_currency(0) == "$0"

    def test_negative(self) -> None:
        assert format_currency(-250) == "-$250"


# ---------- ranges ----------


class TestDisplayRange:
    def test_ten_percent_each_way(self) -> None:
        assert display_range(5_000.0) == (4_500, 5_500)

    def test_custom_variation(self) -> None:
        assert display_range(1_000.0, 0.25) == (750, 1_250)

    def test_rounds_to_whole_units(self) -> None:
        assert display_range(123.0) == (111, 135)

    def test_currency_range(self) -> None:
        assert format_currency_range(4_900.0) == "$4,410 - $5,390"

    def test_number_range(self) -> None:
        assert format_number_range(35_000.0) == "31,500 - 38,500"


# ---------- summary dict ----------


class TestSummaryDict:
    def test_headline_figures(self) -> None:
        summary = _build_result().to_summary_dict()
        assert summary["system_type"] == "rainwater"
        assert summary["total_cost_range_formatted"] == "$4,500 - $5,500"
        assert summary["annual_water_collection_formatted"] == "31,500 - 38,500"
        assert summary["tank_size_formatted"] == "2,520 - 3,080"

    def test_line_items_labelled_in_order(self) -> None:
        summary = _build_result().to_summary_dict()
        labels = [item["label"] for item in summary["line_items"]]
        assert labels == [
            "Gutters & Downspouts",
            "Piping & Fittings",
            "Storage Tank",
            "Filtration & Treatment",
            "Pump System",
            "Miscellaneous & Permits",
        ]

    def test_zero_items_hidden(self) -> None:
        summary = _build_result().to_summary_dict()
        names = {item["name"] for item in summary["line_items"]}
        assert "excavation_cost" not in names

    def test_misc_note_by_system(self) -> None:
        rain = _build_result(SystemType.RAINWATER).to_summary_dict()
        hvac = _build_result(SystemType.HVAC).to_summary_dict()
        assert "permitting/inspection" in rain["misc_cost_note"]
        assert "overflow protection" in hvac["misc_cost_note"]
