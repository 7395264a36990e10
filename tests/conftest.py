"""
Pytest configuration and shared fixtures.
"""

import pytest

from gearinch.components.wheel import Wheel
from gearinch.components.gear import Gear


@pytest.fixture
def road_wheel() -> Wheel:
    """26 inch rim with a 1.25 inch tire (28.5 inch diameter)."""
    return Wheel(26, 1.25)


@pytest.fixture
def small_wheel() -> Wheel:
    """24 inch rim with a 1.25 inch tire (26.5 inch diameter)."""
    return Wheel(24, 1.25)


@pytest.fixture
def mtb_wheel() -> Wheel:
    """26 inch rim with a 1.5 inch tire (29 inch diameter)."""
    return Wheel(26, 1.5)


@pytest.fixture
def big_gear(road_wheel) -> Gear:
    """52x11 on the road wheel."""
    return Gear(52, 11, road_wheel)
