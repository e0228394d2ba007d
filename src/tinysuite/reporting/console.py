from __future__ import annotations

from collections.abc import Iterable

import typer

NAME_PADDING = 4
MESSAGE_INDENT = "  "

STATUS_COLORS: dict[str, str] = {
    "PASS": typer.colors.GREEN,
    "PASSED": typer.colors.GREEN,
    "FAIL": typer.colors.RED,
    "FAILED": typer.colors.RED,
}


def column_width(names: Iterable[str]) -> int:
    """Width of the name column: longest test name plus padding."""
    return max((len(name) for name in names), default=0) + NAME_PADDING


def format_header(test_count: int, suite_name: str) -> str:
    return f"Running {test_count} Tests for Suite {suite_name}"


def format_status(
    name: str, passed: bool, width: int, color: bool | None = None
) -> str:
    """Return "<name padded to width><status>"; only the status is colored."""
    status = "PASS" if passed else "FAIL"
    if color is not False:
        status = typer.style(status, fg=STATUS_COLORS[status])
    return f"{name:<{width}}{status}"


def format_failure_message(message: str) -> str:
    return f"{MESSAGE_INDENT}{message}"


def format_summary(
    total_run: int, total_failed: int, color: bool | None = None
) -> list[str]:
    """Lines printed after the after hook, including the leading blank line."""
    total_passed = total_run - total_failed
    lines: list[str] = []
    if total_failed > 0:
        verdict = "FAILED"
        counts = f"{total_run}/{total_passed}/{total_failed}"
        lines += ["", f"Run/Passed/Failed :{counts}"]
    else:
        verdict = "PASSED"
        if total_run > 0:
            lines += ["", f"Passed/Run: {total_passed}/{total_run}"]
    if color is not False:
        verdict = typer.style(verdict, fg=STATUS_COLORS[verdict])
    lines.append(verdict)
    return lines


def echo_lines(lines: Iterable[str], color: bool | None = None) -> None:
    for line in lines:
        typer.echo(line, color=color)
