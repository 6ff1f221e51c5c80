"""Angle units and the numeric conversions between them."""

from __future__ import annotations

import math
from enum import Enum
from typing import Callable

__all__ = ["Unit", "convert_value"]


class Unit(Enum):
    """A unit in which an angle's value may be expressed."""

    RADIANS = "radians"
    DEGREES = "degrees"
    ROTATIONS = "rotations"
    PERCENTAGE = "percentage"

    def convert(self, value: float, target: Unit) -> float:
        """Convert ``value``, expressed in this unit, into ``target`` units."""
        if not isinstance(target, Unit):
            raise TypeError(f"target must be a Unit, not {type(target).__name__}")
        if target is self:
            return float(value)
        return _CONVERSIONS[self, target](value)


def _scale(factor: float) -> Callable[[float], float]:
    def apply(value: float) -> float:
        return value * factor

    return apply


_CONVERSIONS: dict[tuple[Unit, Unit], Callable[[float], float]] = {
    (Unit.RADIANS, Unit.DEGREES): math.degrees,
    (Unit.RADIANS, Unit.ROTATIONS): _scale(0.15915482422145),
    (Unit.RADIANS, Unit.PERCENTAGE): _scale(15.915482422145),
    (Unit.DEGREES, Unit.RADIANS): math.radians,
    (Unit.DEGREES, Unit.ROTATIONS): _scale(0.002777777777777778),
    (Unit.DEGREES, Unit.PERCENTAGE): _scale(0.2777777777777778),
    (Unit.ROTATIONS, Unit.RADIANS): _scale(math.tau),
    (Unit.ROTATIONS, Unit.DEGREES): _scale(360.0),
    (Unit.ROTATIONS, Unit.PERCENTAGE): _scale(100.0),
    (Unit.PERCENTAGE, Unit.RADIANS): _scale(0.06283185307179587),
    (Unit.PERCENTAGE, Unit.DEGREES): _scale(3.6),
    (Unit.PERCENTAGE, Unit.ROTATIONS): _scale(0.01),
}


def convert_value(value: float, source: Unit, target: Unit) -> float:
    """Convert ``value`` from ``source`` units into ``target`` units."""
    if not isinstance(source, Unit):
        raise TypeError(f"source must be a Unit, not {type(source).__name__}")
    return source.convert(value, target)