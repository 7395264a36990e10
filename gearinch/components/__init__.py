"""
Gear and wheel components.

Gear depends on WheelLike, never on Wheel itself.
"""

from gearinch.components.wheel import WheelLike, Wheel, wheelify, diameters
from gearinch.components.gear import Gear
from gearinch.components.wrapper import GearWrapper

__all__ = [
    "WheelLike",
    "Wheel",
    "wheelify",
    "diameters",
    "Gear",
    "GearWrapper",
]
