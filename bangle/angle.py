"""Angles that carry the unit their value is expressed in."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real

from bangle.units import Unit, convert_value

__all__ = ["Angle"]


@dataclass(eq=False)
class Angle:
    """An angle: a floating point ``value`` expressed in a given ``unit``.

    Angles of any unit can be added to or subtracted from each other; the
    result keeps the unit of the left-hand operand.  Equality and ordering
    compare values and are only defined between angles of the same unit.
    """

    value: float = 0.0
    unit: Unit = Unit.RADIANS

    def __post_init__(self) -> None:
        if not isinstance(self.unit, Unit):
            raise TypeError(f"unit must be a Unit, not {type(self.unit).__name__}")
        self.value = float(self.value)

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def radians(cls, value: float) -> Angle:
        """Create an angle expressed in radians."""
        return cls(value, Unit.RADIANS)

    @classmethod
    def degrees(cls, value: float) -> Angle:
        """Create an angle expressed in degrees."""
        return cls(value, Unit.DEGREES)

    @classmethod
    def rotations(cls, value: float) -> Angle:
        """Create an angle expressed in whole rotations."""
        return cls(value, Unit.ROTATIONS)

    @classmethod
    def percentage(cls, value: float) -> Angle:
        """Create an angle expressed as a percentage of a full rotation."""
        return cls(value, Unit.PERCENTAGE)

    @classmethod
    def from_other(cls, angle: Angle, unit: Unit) -> Angle:
        """Create an angle in ``unit`` equal to ``angle``."""
        if not isinstance(angle, Angle):
            raise TypeError(f"angle must be an Angle, not {type(angle).__name__}")
        return cls(convert_value(angle.value, angle.unit, unit), unit)

    def convert(self, unit: Unit) -> Angle:
        """Return this angle expressed in ``unit``."""
        return type(self).from_other(self, unit)

    def as_radians(self) -> Angle:
        """Return this angle expressed in radians."""
        return self.convert(Unit.RADIANS)

    def as_degrees(self) -> Angle:
        """Return this angle expressed in degrees."""
        return self.convert(Unit.DEGREES)

    def as_rotations(self) -> Angle:
        """Return this angle expressed in rotations."""
        return self.convert(Unit.ROTATIONS)

    def as_percentage(self) -> Angle:
        """Return this angle expressed as a percentage."""
        return self.convert(Unit.PERCENTAGE)

    def _value_of(self, other: Angle) -> float:
        return convert_value(other.value, other.unit, self.unit)

    def __add__(self, other: Angle) -> Angle:
        if not isinstance(other, Angle):
            return NotImplemented
        return type(self)(self.value + self._value_of(other), self.unit)

    def __iadd__(self, other: Angle) -> Angle:
        if not isinstance(other, Angle):
            return NotImplemented
        self.value += self._value_of(other)
        return self

    def __sub__(self, other: Angle) -> Angle:
        if not isinstance(other, Angle):
            return NotImplemented
        return type(self)(self.value - self._value_of(other), self.unit)

    def __isub__(self, other: Angle) -> Angle:
        if not isinstance(other, Angle):
            return NotImplemented
        self.value -= self._value_of(other)
        return self

    def __mul__(self, factor: float) -> Angle:
        if not isinstance(factor, Real):
            return NotImplemented
        return type(self)(self.value * factor, self.unit)

    def __rmul__(self, factor: float) -> Angle:
        return self.__mul__(factor)

    def __imul__(self, factor: float) -> Angle:
        if not isinstance(factor, Real):
            return NotImplemented
        self.value *= factor
        return self

    def __truediv__(self, divisor: float) -> Angle:
        if not isinstance(divisor, Real):
            return NotImplemented
        return type(self)(self.value / divisor, self.unit)

    def __itruediv__(self, divisor: float) -> Angle:
        if not isinstance(divisor, Real):
            return NotImplemented
        self.value /= divisor
        return self

    def __neg__(self) -> Angle:
        return type(self)(self.value * -1.0, self.unit)

    def _comparable(self, other: object) -> bool:
        return isinstance(other, Angle) and other.unit is self.unit

    def __eq__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.value == other.value  # type: ignore[attr-defined]

    def __lt__(self, other: Angle) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: Angle) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: Angle) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: Angle) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.value >= other.value