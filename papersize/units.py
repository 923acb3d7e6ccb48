from __future__ import annotations

from papersize.constants import MM_PER_INCH, POINTS_PER_INCH, UNIT_FACTORS
from papersize.errors import UnknownUnitError


def unit_factor(name: str) -> float | None:
    """Return the inches-per-unit factor for ``name``, or None if the unit is unknown."""
    return UNIT_FACTORS.get(name.lower())


def to_points(value: float, unit: str) -> float:
    factor = unit_factor(unit)
    if factor is None:
        raise UnknownUnitError(unit)
    return value * factor * POINTS_PER_INCH


def from_points(value: float, unit: str) -> float:
    factor = unit_factor(unit)
    if factor is None:
        raise UnknownUnitError(unit)
    return value / POINTS_PER_INCH / factor


def points_to_mm(value: float) -> int:
    """Round a length in points to whole millimetres (half rounds up)."""
    return int(value * MM_PER_INCH / POINTS_PER_INCH + 0.5)
