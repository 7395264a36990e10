"""
Gear-Inch Calculator (gearinch)

Computes a bicycle gear's ratio and gear-inches from a chainring, a cog
and an injected wheel. The gear only relies on the wheel reporting its
diameter, so any object with a diameter() method can stand in for Wheel.

Usage:
    python -m gearinch calculate --chainring 52 --cog 11 --rim 26 --tire 1.25
    python -m gearinch chart --chainrings 52 39 --cogs 11 13 15 17
"""

__version__ = "0.1.0"

from gearinch.errors import GearInchError, InvalidArgumentError, MissingCapabilityError
from gearinch.components.wheel import WheelLike, Wheel, wheelify, diameters
from gearinch.components.gear import Gear
from gearinch.components.wrapper import GearWrapper
from gearinch.models.inputs import WheelInputs, GearInputs
from gearinch.models.outputs import GearReport, GearChartRow, GearChart
from gearinch.chart.charter import GearCharter, build_report

__all__ = [
    "GearInchError",
    "InvalidArgumentError",
    "MissingCapabilityError",
    "WheelLike",
    "Wheel",
    "wheelify",
    "diameters",
    "Gear",
    "GearWrapper",
    "WheelInputs",
    "GearInputs",
    "GearReport",
    "GearChartRow",
    "GearChart",
    "GearCharter",
    "build_report",
]
