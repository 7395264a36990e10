"""
Tests for gear reports and charts.
"""

import pytest

from gearinch.chart.charter import GearCharter, build_report
from gearinch.components.gear import Gear
from gearinch.errors import InvalidArgumentError


class TestBuildReport:
    """Tests for build_report."""

    def test_report_values(self, big_gear):
        """Test report for 52x11 on a 26 x 1.25 wheel."""
        report = build_report(big_gear)

        assert report.chainring == 52
        assert report.cog == 11
        assert report.ratio == pytest.approx(4.7272727273)
        assert report.wheel_diameter_in == 28.5
        assert report.gear_inches == pytest.approx(134.7272727)
        assert report.development_m == pytest.approx(10.75, rel=0.01)

    def test_report_matches_gear(self, mtb_wheel):
        """Test that report figures equal the gear's own queries."""
        gear = Gear(30, 27, mtb_wheel)
        report = build_report(gear)

        assert report.gear_inches == gear.gear_inches()
        assert report.ratio == gear.ratio()


class TestGearCharter:
    """Tests for GearCharter."""

    def test_one_row_per_combination(self, road_wheel):
        """Test that every chainring is paired with every cog."""
        chart = GearCharter(road_wheel, [52, 39], [11, 13, 15]).generate_chart()

        assert len(chart.rows) == 6
        assert [(r.chainring, r.cog) for r in chart.rows] == [
            (52, 11), (52, 13), (52, 15), (39, 11), (39, 13), (39, 15),
        ]

    def test_chart_wheel_diameter(self, road_wheel):
        """Test chart carries the wheel diameter."""
        chart = GearCharter(road_wheel, [52], [11]).generate_chart()

        assert chart.wheel_diameter_in == 28.5
        assert chart.rows[0].gear_inches == pytest.approx(134.7272727)

    def test_highest_and_lowest(self, mtb_wheel):
        """Test extremes of a chart."""
        chart = GearCharter(mtb_wheel, [30, 52], [11, 27]).generate_chart()

        assert (chart.highest.chainring, chart.highest.cog) == (52, 11)
        assert (chart.lowest.chainring, chart.lowest.cog) == (30, 27)
        assert chart.lowest.gear_inches == pytest.approx(32.222222)

    def test_zero_cog_rejected(self, road_wheel):
        """Test that a zero cog fails the whole chart."""
        charter = GearCharter(road_wheel, [52], [11, 0])

        with pytest.raises(InvalidArgumentError):
            charter.generate_chart()

    def test_empty_chart_rejected(self, road_wheel):
        """Test that no chainrings means no chart."""
        with pytest.raises(ValueError):
            GearCharter(road_wheel, [], [11]).generate_chart()
