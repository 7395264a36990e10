"""
Gear calculator.

A Gear combines a chainring, a cog and an injected wheel. It never builds
its own wheel and only ever asks it for its diameter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gearinch.components.wheel import WheelLike
from gearinch.errors import InvalidArgumentError, MissingCapabilityError

if TYPE_CHECKING:
    from gearinch.models.inputs import GearInputs


class Gear:
    """
    Computes gear ratio and gear-inches for a chainring/cog pair on a wheel.

    Args:
        chainring: Teeth on the front chainring
        cog: Teeth on the rear cog (must be non-zero)
        wheel: Any object satisfying WheelLike

    Raises:
        InvalidArgumentError: if cog is zero
        MissingCapabilityError: if wheel has no diameter() method
    """

    def __init__(self, chainring: float, cog: float, wheel: WheelLike):
        if cog == 0:
            raise InvalidArgumentError("cog must be non-zero")
        if not isinstance(wheel, WheelLike) or not callable(wheel.diameter):
            raise MissingCapabilityError(
                f"wheel must provide diameter(); got {type(wheel).__name__}"
            )
        self._chainring = chainring
        self._cog = cog
        self._wheel = wheel

    @classmethod
    def from_inputs(cls, inputs: GearInputs, wheel: WheelLike) -> Gear:
        """Build a Gear from a named-field configuration."""
        return cls(inputs.chainring, inputs.cog, wheel)

    @property
    def chainring(self) -> float:
        return self._chainring

    @property
    def cog(self) -> float:
        return self._cog

    @property
    def wheel(self) -> WheelLike:
        return self._wheel

    def ratio(self) -> float:
        """Wheel revolutions per crank revolution."""
        return float(self._chainring) / float(self._cog)

    def gear_inches(self) -> float:
        """Ratio times wheel diameter; the wheel is queried on every call."""
        return self.ratio() * float(self._wheel.diameter())

    def __repr__(self) -> str:
        return f"Gear(chainring={self._chainring!r}, cog={self._cog!r}, wheel={self._wheel!r})"
