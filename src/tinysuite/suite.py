from __future__ import annotations

import itertools
import logging
import sys
from collections.abc import Callable
from dataclasses import asdict, dataclass, field
from typing import Any, NoReturn

import typer

from tinysuite.assertions.base import AssertionFailure
from tinysuite.config import SuiteConfig
from tinysuite.reporting.console import (
    column_width,
    echo_lines,
    format_failure_message,
    format_header,
    format_status,
    format_summary,
)
from tinysuite.verbose import close_logger, setup_logger

Body = Callable[[], Any]

_suite_ids = itertools.count(1)


def _noop() -> None:
    pass


@dataclass(frozen=True)
class TestCase:
    __test__ = False

    name: str
    body: Body = _noop


@dataclass
class TestOutcome:
    __test__ = False

    name: str
    passed: bool
    message: str | None = None


@dataclass
class RunResult:
    """Counters and per-test outcomes of a single suite run.

    Attributes:
        total_run: Number of test bodies invoked.
        total_failed: Number of test bodies that raised.
        column_width: Width of the name column in the report
            (longest test name plus 4).
        outcomes: One entry per test, in execution order.
    """

    total_run: int = 0
    total_failed: int = 0
    column_width: int = 0
    outcomes: list[TestOutcome] = field(default_factory=list)

    @property
    def total_passed(self) -> int:
        return self.total_run - self.total_failed

    @property
    def all_passed(self) -> bool:
        return self.total_failed == 0

    @property
    def exit_code(self) -> int:
        return self.total_failed

    def to_dict(self) -> dict[str, Any]:
        return {
            **asdict(self),
            "total_passed": self.total_passed,
            "all_passed": self.all_passed,
        }


def _failure_message(exc: Exception) -> str:
    if isinstance(exc, AssertionFailure):
        return exc.message
    text = str(exc)
    return f"{type(exc).__name__}: {text}" if text else type(exc).__name__


class Suite:
    """Ordered collection of named tests with before/after hooks."""

    def __init__(self, name: str | None = None, config: SuiteConfig | None = None):
        self.config = config or SuiteConfig()
        self.name = name if name is not None else self.config.name
        self.tests: list[TestCase] = []
        self._before: Body = _noop
        self._after: Body = _noop
        # Per-instance so suites sharing a name keep separate handlers
        self._logger_name = f"tinysuite_{self.name}_{next(_suite_ids)}"

    def test(self, name: str | None = None, body: Body | None = None) -> None:
        """Register a test. Unnamed tests are numbered by registration count."""
        if name is None:
            name = f"Unnamed Test {len(self.tests)}"
        if body is None:
            body = _noop
        self.tests.append(TestCase(name=name, body=body))

    def before(self, fn: Body | None = None) -> None:
        """Set the hook run once before all tests; no argument resets it."""
        self._before = fn if fn is not None else _noop

    def after(self, fn: Body | None = None) -> None:
        """Set the hook run once after all tests; no argument resets it."""
        self._after = fn if fn is not None else _noop

    def execute(self) -> RunResult:
        """Run hooks and every registered test in order, printing a line per test.

        Test failures are recorded and the run continues. Hook errors
        propagate to the caller. The debug log is closed when the run ends.
        """
        logger = setup_logger(
            self.config.debug_log_path,
            verbose=self.config.verbose,
            logger_name=self._logger_name,
        )
        try:
            return self._execute(logger)
        finally:
            close_logger(logger)

    def _execute(self, logger: logging.Logger) -> RunResult:
        color = self.config.echo_color
        # Snapshot so a body registering more tests cannot change this run
        tests = list(self.tests)

        typer.echo(format_header(len(tests), self.name), color=color)
        logger.debug(f"Starting suite '{self.name}' with {len(tests)} test(s)")

        result = RunResult(column_width=column_width(t.name for t in tests))

        self._run_hook("before", self._before, logger)

        for case in tests:
            result.total_run += 1
            outcome = self._run_test(case, result.column_width, logger)
            result.outcomes.append(outcome)
            if not outcome.passed:
                result.total_failed += 1

        self._run_hook("after", self._after, logger)

        logger.debug(
            f"Suite '{self.name}' finished: {result.total_run} run, "
            f"{result.total_passed} passed, {result.total_failed} failed"
        )
        return result

    def run(self) -> NoReturn:
        """Run all tests, print the summary and exit with the failure count."""
        result = self.execute()
        color = self.config.echo_color
        echo_lines(
            format_summary(result.total_run, result.total_failed, color=color),
            color=color,
        )
        sys.exit(result.exit_code)

    def _run_test(
        self, case: TestCase, width: int, logger: logging.Logger
    ) -> TestOutcome:
        color = self.config.echo_color
        try:
            case.body()
        except Exception as e:
            message = _failure_message(e)
            typer.echo(format_status(case.name, False, width, color), color=color)
            typer.echo(format_failure_message(message), color=color)
            logger.info(f"Test '{case.name}' failed: {message}")
            return TestOutcome(name=case.name, passed=False, message=message)

        typer.echo(format_status(case.name, True, width, color), color=color)
        logger.debug(f"Test '{case.name}' passed")
        return TestOutcome(name=case.name, passed=True)

    def _run_hook(self, label: str, hook: Body, logger: logging.Logger) -> None:
        logger.debug(f"Running {label} hook for suite '{self.name}'")
        try:
            hook()
        except Exception as e:
            logger.error(
                f"{label.capitalize()} hook failed for suite '{self.name}': {e}"
            )
            raise


def new_suite(name: str | None = None, config: SuiteConfig | None = None) -> Suite:
    """Create an empty suite."""
    return Suite(name=name, config=config)
