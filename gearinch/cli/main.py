"""
Command-line interface for the gear-inch calculator.

Usage:
    python -m gearinch calculate --chainring 52 --cog 11 --rim 26 --tire 1.25 [--json]
    python -m gearinch chart --chainrings 52 39 --cogs 11 13 15 --rim 26 --tire 1.25 [--json]
"""

import argparse
import sys

from gearinch import __version__
from gearinch.chart.charter import GearCharter, build_report
from gearinch.cli.readable_output import print_chart, print_report
from gearinch.components.gear import Gear
from gearinch.models.inputs import GearInputs, WheelInputs


def _add_wheel_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--rim",
        type=float,
        default=26.0,
        help="Rim diameter in inches (default: 26)",
    )
    parser.add_argument(
        "--tire",
        type=float,
        default=1.5,
        help="Tire thickness in inches (default: 1.5)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print JSON instead of a readable summary",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="gearinch",
        description="Gear-inch calculator - bicycle gear ratio and gear-inches.",
    )
    parser.add_argument("--version", action="version", version=f"gearinch {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # calculate command
    calculate_parser = subparsers.add_parser(
        "calculate",
        help="Calculate ratio and gear-inches for one gear",
    )
    calculate_parser.add_argument(
        "--chainring", "-c",
        type=float,
        default=40.0,
        help="Teeth on the chainring (default: 40)",
    )
    calculate_parser.add_argument(
        "--cog", "-g",
        type=float,
        default=18.0,
        help="Teeth on the rear cog (default: 18)",
    )
    _add_wheel_arguments(calculate_parser)

    # chart command
    chart_parser = subparsers.add_parser(
        "chart",
        help="Gear-inches for every chainring/cog combination",
    )
    chart_parser.add_argument(
        "--chainrings",
        type=float,
        nargs="+",
        required=True,
        help="Chainring tooth counts",
    )
    chart_parser.add_argument(
        "--cogs",
        type=float,
        nargs="+",
        required=True,
        help="Cog tooth counts",
    )
    _add_wheel_arguments(chart_parser)

    return parser


def cmd_calculate(args: argparse.Namespace) -> int:
    """Calculate a single gear."""
    try:
        inputs = GearInputs(
            chainring=args.chainring,
            cog=args.cog,
            wheel=WheelInputs(rim=args.rim, tire=args.tire),
        )
        gear = Gear.from_inputs(inputs, inputs.wheel.to_wheel())
        report = build_report(gear)

        if args.json:
            print(report.model_dump_json(indent=2))
        else:
            print_report(report)

        return 0

    except ValueError as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        return 1


def cmd_chart(args: argparse.Namespace) -> int:
    """Build a gear chart."""
    try:
        wheel = WheelInputs(rim=args.rim, tire=args.tire).to_wheel()

        print(
            f"Charting {len(args.chainrings)} chainring(s) x {len(args.cogs)} cog(s)...",
            file=sys.stderr,
        )

        charter = GearCharter(wheel, args.chainrings, args.cogs)
        chart = charter.generate_chart()

        if args.json:
            print(chart.model_dump_json(indent=2))
        else:
            print_chart(chart)

        print(
            f"Range: {chart.lowest.gear_inches:.1f} - {chart.highest.gear_inches:.1f} gear-inches",
            file=sys.stderr,
        )
        return 0

    except ValueError as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        return 1


def cli(argv=None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "calculate": cmd_calculate,
        "chart": cmd_chart,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


def main():
    """Console script entrypoint wrapper."""
    return cli()


if __name__ == "__main__":
    sys.exit(cli())
