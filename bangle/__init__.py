"""Strongly-typed angles in radians, degrees, rotations or percentages."""

__version__ = "0.5.0"
__all__ = ["angle", "units"]