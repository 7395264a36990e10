"""
Exception types raised by gearinch.

Errors are raised at construction time so a malformed gear/wheel pairing
is reported before any calculation runs.
"""


class GearInchError(Exception):
    """Base class for all gearinch errors."""


class InvalidArgumentError(GearInchError, ValueError):
    """An argument has a value the calculation cannot use (e.g. a zero cog)."""


class MissingCapabilityError(GearInchError, TypeError):
    """A collaborator does not expose the capability it is expected to have."""
