"""
Helpers to turn reports and charts into a compact, human-readable
console summary.
"""

from __future__ import annotations

from gearinch.models.outputs import GearChart, GearReport


def _fmt_teeth(value: float) -> str:
    """Tooth counts are whole numbers in practice; drop the trailing .0."""
    return f"{value:g}"


def print_report(report: GearReport) -> None:
    """Print one gear report."""
    print(f"Gear {_fmt_teeth(report.chainring)}x{_fmt_teeth(report.cog)}")
    print(f"  Ratio:          {report.ratio:.4f}")
    print(f"  Wheel diameter: {report.wheel_diameter_in:.2f} in")
    print(f"  Gear-inches:    {report.gear_inches:.2f}")
    print(f"  Development:    {report.development_m:.2f} m")


def print_chart(chart: GearChart) -> None:
    """Print a chart as one row per chainring/cog combination."""
    print(f"Wheel diameter: {chart.wheel_diameter_in:.2f} in")
    print(f"{'Gear':>9}  {'Ratio':>7}  {'Gear-in':>8}  {'Dev (m)':>7}")
    for row in chart.rows:
        gear = f"{_fmt_teeth(row.chainring)}x{_fmt_teeth(row.cog)}"
        print(
            f"{gear:>9}  {row.ratio:>7.3f}  {row.gear_inches:>8.1f}  {row.development_m:>7.2f}"
        )
