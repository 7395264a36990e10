"""
Entry point for running gearinch as a module.

Usage:
    python -m gearinch calculate --chainring 52 --cog 11 --rim 26 --tire 1.25
    python -m gearinch chart --chainrings 52 39 --cogs 11 13 15
"""

import sys

from gearinch.cli.main import cli

if __name__ == "__main__":
    sys.exit(cli())
