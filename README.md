# bangle

Angles that know their unit. An `Angle` holds a floating point value
specified in radians, degrees, rotations or percentages. It converts
between those units when you ask it to.

## Installation

```
pip install bangle
```

## Creating angles

Each unit has its own constructor:

```python
import math
from bangle.angle import Angle

degrees = Angle.degrees(90.0)
radians = Angle.radians(math.pi / 2)
rotations = Angle.rotations(0.25)
percentage = Angle.percentage(25.0)
```

You can also build an angle directly from a value and a `Unit`. If you
leave out the arguments, the angle is `0.0` radians. The value is stored
as a `float` in the public `value` attribute, which you may change in
place:

```python
from bangle.units import Unit

angle = Angle(90.0, Unit.DEGREES)
angle.value = 180.0
```

If the unit is not a `Unit`, the constructor raises `TypeError`.

## Converting

```python
degrees = Angle.degrees(90.0)
degrees.as_radians()     # pi / 2 radians
degrees.as_rotations()   # 0.25 rotations
degrees.as_percentage()  # 25.0 percent
```

`convert(unit)` takes a `Unit` as the target. `Angle.from_other(angle, unit)`
builds an angle in the given unit from any other angle:

```python
from bangle.units import Unit

Angle.degrees(90.0).convert(Unit.ROTATIONS).value             # 0.25
Angle.from_other(Angle.percentage(25.0), Unit.DEGREES).value  # 90.0
```

You can convert plain numbers without building an angle at all, with
either `convert_value` or `Unit.convert`:

```python
from bangle.units import Unit, convert_value

convert_value(180.0, Unit.DEGREES, Unit.ROTATIONS)  # 0.5
Unit.ROTATIONS.convert(0.5, Unit.DEGREES)          # 180.0
```

Both raise `TypeError` when a unit argument is not a `Unit`.

## Arithmetic

You can add and subtract angles of any units. The result takes the unit
of the left-hand operand:

```python
full_circle = (
    Angle.degrees(90.0)
    + Angle.radians(math.pi / 2)
    + Angle.rotations(0.25)
    + Angle.percentage(25.0)
)
full_circle.value  # 360.0 degrees, up to floating point rounding
```

You can multiply and divide angles by plain numbers, negate them, and
compare them with other angles:

```python
angle = Angle.degrees(90.0)
angle *= 4.0   # 360 degrees
angle /= 2.0   # 180 degrees
-angle         # -180 degrees
2 * angle      # 360 degrees

Angle.degrees(90.0) < Angle.degrees(180.0)  # True
```

Equality and ordering compare the stored values, and only between angles
of the same unit:

- Angles of different units are never equal.
- Ordering angles of different units raises `TypeError`.
- Angles are mutable, so they are not hashable.

## Running the tests

```
pip install -e .[test]
pytest
```