"""
Gear reports and gear charts.

A report describes one gear; a chart sweeps every chainring/cog
combination for a single wheel.
"""

from typing import Iterable

from gearinch.components.gear import Gear
from gearinch.components.wheel import WheelLike
from gearinch.models.outputs import GearChart, GearChartRow, GearReport
from gearinch.physics.units import development_m


def build_report(gear: Gear) -> GearReport:
    """
    Summarize a gear.

    Args:
        gear: A constructed Gear

    Returns:
        GearReport with ratio, wheel diameter, gear-inches and development
    """
    gear_inches = gear.gear_inches()
    return GearReport(
        chainring=gear.chainring,
        cog=gear.cog,
        ratio=gear.ratio(),
        wheel_diameter_in=gear.wheel.diameter(),
        gear_inches=gear_inches,
        development_m=development_m(gear_inches),
    )


class GearCharter:
    """
    Builds a gear chart for one wheel.

    Every chainring is paired with every cog. A zero cog fails when its
    Gear is constructed, so no partial chart is returned.
    """

    def __init__(
        self,
        wheel: WheelLike,
        chainrings: Iterable[float],
        cogs: Iterable[float],
    ):
        self.wheel = wheel
        self.chainrings = list(chainrings)
        self.cogs = list(cogs)

    def generate_gears(self) -> list[Gear]:
        """All chainring/cog combinations, chainring-major."""
        return [
            Gear(chainring, cog, self.wheel)
            for chainring in self.chainrings
            for cog in self.cogs
        ]

    def generate_chart(self) -> GearChart:
        rows = []
        for gear in self.generate_gears():
            gear_inches = gear.gear_inches()
            rows.append(
                GearChartRow(
                    chainring=gear.chainring,
                    cog=gear.cog,
                    ratio=gear.ratio(),
                    gear_inches=gear_inches,
                    development_m=development_m(gear_inches),
                )
            )
        return GearChart(wheel_diameter_in=self.wheel.diameter(), rows=rows)
