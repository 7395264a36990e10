"""
Pydantic models for gear calculator inputs and outputs.
"""

from gearinch.models.inputs import WheelInputs, GearInputs
from gearinch.models.outputs import GearReport, GearChartRow, GearChart

__all__ = [
    "WheelInputs",
    "GearInputs",
    "GearReport",
    "GearChartRow",
    "GearChart",
]
