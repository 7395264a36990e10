"""
Adapter for positional gear constructors.

Some gear classes (including ones owned by third parties) take their
arguments positionally. GearWrapper exposes a named-argument factory so
callers never depend on argument order.
"""

from typing import Any, Callable

from gearinch.components.gear import Gear
from gearinch.components.wheel import WheelLike


class GearWrapper:
    """Named-argument front for a positional (chainring, cog, wheel) constructor."""

    @staticmethod
    def gear(
        *,
        chainring: float,
        cog: float,
        wheel: WheelLike,
        factory: Callable[[float, float, WheelLike], Any] = Gear,
    ) -> Any:
        """
        Build a gear from named arguments.

        Args:
            chainring: Teeth on the chainring
            cog: Teeth on the rear cog
            wheel: Any object satisfying WheelLike
            factory: Positional (chainring, cog, wheel) constructor

        Returns:
            Whatever the factory returns; a Gear by default
        """
        return factory(chainring, cog, wheel)
