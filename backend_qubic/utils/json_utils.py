"""JSON value helpers for the dashboard wire format."""

from __future__ import annotations


def json_number(value: float) -> int | float:
    """Whole floats as int (250000.0 -> 250000); anything else unchanged."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value
