"""
Gear reports and chainring/cog charts.
"""

from gearinch.chart.charter import GearCharter, build_report

__all__ = ["GearCharter", "build_report"]
