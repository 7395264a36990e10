"""
Command-line interface for gearinch.
"""

from gearinch.cli.main import cli, main

__all__ = ["cli", "main"]
