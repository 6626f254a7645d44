"""Exception hierarchy for chemsource."""

from __future__ import annotations


class ChemSourceError(Exception):
    """Base class for all chemsource errors."""


class ContractViolation(ChemSourceError, AssertionError):
    """A caller broke the calling contract of a numerical routine.

    Raised for non-positive state scalars and mis-sized arrays. These are
    programming errors; callers are not expected to recover from them.
    """


class MechanismError(ChemSourceError, ValueError):
    """Invalid mechanism data detected while building species or reactions."""
