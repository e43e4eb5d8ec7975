"""Formatting helpers for presenting estimates.

The engine returns single point figures. The calculator never shows those
directly: every currency and volume figure is displayed as a ±10% range in
whole units (e.g. '$4,410 - $5,390').
"""

from __future__ import annotations

DISPLAY_VARIATION = 0.10


def format_currency(amount: float) -> str:
    """Format a USD amount with no cents and comma separators."""
    if amount < 0:
        return f"-${-amount:,.0f}"
    return f"${amount:,.0f}"


def display_range(value: float, variation: float = DISPLAY_VARIATION) -> tuple[int, int]:
    """Return ``(min, max)`` at ``value`` ± ``variation``, rounded to whole units."""
    return round(value * (1 - variation)), round(value * (1 + variation))


def format_currency_range(amount: float, variation: float = DISPLAY_VARIATION) -> str:
    """Format a USD amount as '$MIN - $MAX'."""
    low, high = display_range(amount, variation)
    return f"{format_currency(low)} - {format_currency(high)}"


def format_number_range(value: float, variation: float = DISPLAY_VARIATION) -> str:
    """Format a quantity (gallons) as 'MIN - MAX' with comma separators."""
    low, high = display_range(value, variation)
    return f"{low:,} - {high:,}"
