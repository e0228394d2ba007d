"""Assertion primitives used inside test bodies."""

from tinysuite.assertions.base import AssertionFailure
from tinysuite.assertions.deterministic import (
    equal,
    fail,
    is_none,
    near_equal,
    not_equal,
    ok,
)

__all__ = [
    "AssertionFailure",
    "equal",
    "fail",
    "is_none",
    "near_equal",
    "not_equal",
    "ok",
]
