"""Deterministic assertion checks (equality, truthiness, None, tolerance)."""

from __future__ import annotations

from typing import Any

from tinysuite.assertions.base import AssertionFailure

DEFAULT_TOLERANCE = 1e-4


def _check(condition: Any, message: str) -> None:
    if not condition:
        raise AssertionFailure(message)


def equal(expected: Any, actual: Any, msg: str | None = None) -> None:
    """Check that two values compare equal."""
    if msg is None:
        msg = f"Expected {expected}, was {actual}"
    _check(expected == actual, msg)


def not_equal(expected: Any, actual: Any, msg: str | None = None) -> None:
    """Check that two values do not compare equal."""
    if msg is None:
        msg = f"Expected not to be {expected}, was {actual}"
    _check(expected != actual, msg)


def ok(actual: Any, msg: str | None = None) -> None:
    """Check that a value is truthy."""
    if msg is None:
        msg = f"Expected true, was {actual}"
    _check(actual, msg)


def fail(msg: str | None = None) -> None:
    """Fail the current test unconditionally."""
    if msg is None:
        msg = "Test was manually failed"
    raise AssertionFailure(msg)


def is_none(actual: Any, msg: str | None = None) -> None:
    """Check that a value is None."""
    if msg is None:
        msg = f"Expected None, was {actual}"
    _check(actual is None, msg)


def near_equal(
    expected: float,
    actual: float,
    msg: str | None = None,
    tolerance: float | None = None,
    absolute: bool = False,
) -> None:
    """Check that two numbers are within a tolerance of each other.

    By default the tolerance is relative: the allowed delta is
    ``abs(tolerance * expected)``. Against an expected value of zero that
    delta is zero, so only ``absolute=True`` can accept a non-exact match.

    Args:
        expected: Reference value.
        actual: Value under test.
        msg: Optional message replacing the default description.
        tolerance: Relative (or absolute) tolerance. None means 1e-4.
        absolute: Treat ``tolerance`` as an absolute delta.
    """
    tol = DEFAULT_TOLERANCE if tolerance is None else tolerance
    delta = abs(tol if absolute else tol * expected)
    if msg is None:
        msg = f"Expected {expected}+/-{delta}, was {actual}"
    _check(abs(expected - actual) < delta, msg)
