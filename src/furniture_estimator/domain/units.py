"""Unit conversion constants.

Panel dimensions are kept in the spec's unit of measure. Board area is
reported in square feet and edge banding in metres regardless of the
input unit, so every conversion goes through the tables below.
"""

from __future__ import annotations

import math

from .exceptions import NumericOverflowError
from .value_objects import UnitOfMeasure

__all__ = [
    "MM_PER_UNIT",
    "METRES_PER_UNIT",
    "SQMM_PER_SQFT",
    "area_sqft",
    "ensure_finite",
    "from_mm",
    "to_metres",
    "to_mm",
]

MM_PER_UNIT: dict[UnitOfMeasure, float] = {
    UnitOfMeasure.MM: 1.0,
    UnitOfMeasure.INCH: 25.4,
    UnitOfMeasure.FT: 304.8,
}

# Edge banding is always reported in metres
METRES_PER_UNIT: dict[UnitOfMeasure, float] = {
    UnitOfMeasure.MM: 0.001,
    UnitOfMeasure.INCH: 0.0254,
    UnitOfMeasure.FT: 0.3048,
}

SQMM_PER_SQFT = 92903.04


def to_mm(value: float, unit: UnitOfMeasure) -> float:
    """Convert a length in ``unit`` to millimetres."""
    return value * MM_PER_UNIT[unit]


def from_mm(value_mm: float, unit: UnitOfMeasure) -> float:
    """Convert a length in millimetres to ``unit``."""
    return value_mm / MM_PER_UNIT[unit]


def to_metres(value: float, unit: UnitOfMeasure) -> float:
    """Convert a length in ``unit`` to metres."""
    return value * METRES_PER_UNIT[unit]


def area_sqft(length: float, width: float, unit: UnitOfMeasure) -> float:
    """Area of a length x width rectangle in square feet."""
    factor = MM_PER_UNIT[unit]
    return (length * factor) * (width * factor) / SQMM_PER_SQFT


def ensure_finite(quantity: str, value: float) -> float:
    """Return ``value`` unchanged, raising if it is NaN or infinite."""
    if not math.isfinite(value):
        raise NumericOverflowError(quantity, value)
    return value
