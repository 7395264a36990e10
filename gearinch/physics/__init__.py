"""
Unit-aware helpers for gear calculations.

Uses pint so conversions between imperial wheel sizes and metric
distances stay dimensionally correct.
"""

from gearinch.physics.units import ureg, Q_, magnitude_in, inches_to_m, development_m

__all__ = [
    "ureg",
    "Q_",
    "magnitude_in",
    "inches_to_m",
    "development_m",
]
