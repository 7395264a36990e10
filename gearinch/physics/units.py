"""
Unit registry and helpers for gear calculations.

Wheel dimensions are conventionally given in inches; pint keeps the
conversion to metric explicit.
"""

import math

import pint

# Shared unit registry for the entire package
ureg = pint.UnitRegistry()

# Shorthand for creating quantities
Q_ = ureg.Quantity

inch = ureg.inch
meter = ureg.meter


def magnitude_in(quantity: pint.Quantity, unit: str) -> float:
    """Get the magnitude of a quantity in specified units."""
    return quantity.to(unit).magnitude


def inches_to_m(length_in: float) -> float:
    """Convert a length in inches to meters."""
    return magnitude_in(Q_(length_in, "inch"), "meter")


def development_m(gear_inches: float) -> float:
    """
    Distance travelled per crank revolution, in meters.

    Development is gear-inches times pi (the circumference of the
    equivalent direct-drive wheel).
    """
    return inches_to_m(gear_inches * math.pi)
