"""
Wheel capability and its concrete implementation.

WheelLike is the only thing a Gear knows about a wheel: something that
can report its diameter. Wheel is the stock implementation, built from a
rim size and a tire size.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Protocol, Sequence, runtime_checkable

from gearinch.errors import InvalidArgumentError


@runtime_checkable
class WheelLike(Protocol):
    """
    Protocol that any wheel handed to a Gear must satisfy.

    Implementations compute diameter from dimensions they own; callers
    must not depend on how.
    """

    def diameter(self) -> float:
        ...


@dataclass(frozen=True)
class Wheel:
    """A wheel described by rim diameter and tire thickness (inches)."""
    rim: float
    tire: float

    def diameter(self) -> float:
        """Outside diameter: rim plus tire on both sides."""
        return self.rim + (self.tire * 2)

    def circumference(self) -> float:
        """Rolling circumference of the wheel."""
        return self.diameter() * math.pi


def wheelify(pairs: Iterable[Sequence[float]]) -> list[Wheel]:
    """
    Convert raw [rim, tire] pairs into Wheel values.

    This is the one place that knows the layout of the raw data; if the
    layout changes, only this function changes.

    Raises:
        InvalidArgumentError: if a pair does not have exactly two items
    """
    wheels = []
    for pair in pairs:
        if len(pair) != 2:
            raise InvalidArgumentError(
                f"Expected a [rim, tire] pair, got {len(pair)} values: {pair!r}"
            )
        wheels.append(Wheel(pair[0], pair[1]))
    return wheels


def diameters(pairs: Iterable[Sequence[float]]) -> list[float]:
    """Diameters of raw [rim, tire] data."""
    return [wheel.diameter() for wheel in wheelify(pairs)]
