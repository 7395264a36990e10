"""
Output models for gear calculations.

These models define the structure of reports and gear charts returned
by the calculator.
"""

from pydantic import BaseModel, Field


class GearReport(BaseModel):
    """
    Calculated figures for one gear on one wheel.

    Lengths are in inches unless the field name says otherwise.
    """
    chainring: float = Field(..., description="Teeth on the chainring")
    cog: float = Field(..., description="Teeth on the rear cog")
    ratio: float = Field(..., description="Chainring / cog")
    wheel_diameter_in: float = Field(..., description="Wheel outside diameter")
    gear_inches: float = Field(..., description="Ratio times wheel diameter")
    development_m: float = Field(
        ...,
        description="Distance travelled per crank revolution in meters"
    )


class GearChartRow(BaseModel):
    """One chainring/cog combination in a gear chart."""
    chainring: float = Field(..., description="Teeth on the chainring")
    cog: float = Field(..., description="Teeth on the rear cog")
    ratio: float = Field(..., description="Chainring / cog")
    gear_inches: float = Field(..., description="Ratio times wheel diameter")
    development_m: float = Field(..., description="Development in meters")


class GearChart(BaseModel):
    """
    Gear-inches for every chainring/cog combination on a single wheel.
    """
    wheel_diameter_in: float = Field(..., description="Wheel outside diameter")
    rows: list[GearChartRow] = Field(
        ...,
        min_length=1,
        description="Rows ordered by chainring, then cog, as given"
    )

    @property
    def highest(self) -> GearChartRow:
        """Row with the largest gear-inches."""
        return max(self.rows, key=lambda r: r.gear_inches)

    @property
    def lowest(self) -> GearChartRow:
        """Row with the smallest gear-inches."""
        return min(self.rows, key=lambda r: r.gear_inches)
