"""Small unit-testing harness: named suites, hooks, aligned PASS/FAIL reports."""

from tinysuite import assertions
from tinysuite.assertions import (
    AssertionFailure,
    equal,
    fail,
    is_none,
    near_equal,
    not_equal,
    ok,
)
from tinysuite.config import ColorMode, SuiteConfig, load_config
from tinysuite.suite import RunResult, Suite, TestCase, TestOutcome, new_suite

__all__ = [
    "AssertionFailure",
    "ColorMode",
    "RunResult",
    "Suite",
    "SuiteConfig",
    "TestCase",
    "TestOutcome",
    "assertions",
    "equal",
    "fail",
    "is_none",
    "load_config",
    "near_equal",
    "new_suite",
    "not_equal",
    "ok",
]
