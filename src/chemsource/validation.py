"""Assertion-style contract checks.

These guard the entry of numerical routines. They raise `ContractViolation`
and are meant to be skipped entirely when precondition checking is switched
off (see `chemsource.config`).
"""

from __future__ import annotations

from typing import Any

from chemsource.errors import ContractViolation


def check_greater(value: float, bound: float, name: str) -> None:
    # NaN fails this comparison too
    if not value > bound:
        raise ContractViolation(f"{name} must be greater than {bound!r}, got {value!r}")


def check_equal_to(actual: Any, expected: Any, name: str) -> None:
    if actual != expected:
        raise ContractViolation(f"{name} must equal {expected!r}, got {actual!r}")


def check_length(array: Any, expected: int, name: str) -> None:
    try:
        size = len(array)
    except TypeError as exc:
        raise ContractViolation(f"{name} must be a sequence of length {expected}") from exc
    check_equal_to(size, expected, f"len({name})")
