"""
Input models for gear calculations.

These models carry named-field configuration so that callers never
depend on constructor argument order.
"""

from pydantic import BaseModel, Field

from gearinch.components.wheel import Wheel


class WheelInputs(BaseModel):
    """
    Wheel dimensions.

    Both values share one linear unit; inches by convention.
    """
    rim: float = Field(..., gt=0, description="Rim diameter in inches")
    tire: float = Field(..., gt=0, description="Tire thickness in inches")

    def to_wheel(self) -> Wheel:
        """Build the Wheel these inputs describe."""
        return Wheel(rim=self.rim, tire=self.tire)


class GearInputs(BaseModel):
    """
    Gear configuration.

    Tooth counts default to a 40/18 combination when not supplied.
    """
    chainring: float = Field(default=40, gt=0, description="Teeth on the chainring")
    cog: float = Field(default=18, gt=0, description="Teeth on the rear cog")
    wheel: WheelInputs = Field(
        default_factory=lambda: WheelInputs(rim=26, tire=1.5),
        description="Wheel the gear drives",
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "chainring": 52,
                "cog": 11,
                "wheel": {
                    "rim": 26,
                    "tire": 1.25,
                },
            }
        }
    }
