"""Verbose logging configuration for debug output."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def setup_logger(
    debug_file: Path | None = None,
    verbose: bool = False,
    logger_name: str = "tinysuite",
) -> logging.Logger:
    """
    Configure and return a logger for suite debug output.

    Writes to debug_file when one is given, and to stderr if verbose=True.
    Never writes to stdout, which carries the test report.

    Args:
        debug_file: Path to debug log file, or None to skip file logging
        verbose: If True, also log to stderr.
        logger_name: Name of the logger instance (one per suite)

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(logger_name)

    # Release handlers left over from a previous run under this name
    close_logger(logger)

    logger.disabled = False
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(message)s", datefmt="%Y-%m-%dT%H:%M:%S"
    )

    if debug_file is not None:
        debug_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(debug_file, mode="a")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if verbose:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(logging.DEBUG)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger


def close_logger(logger: logging.Logger) -> None:
    """Close and detach every handler, releasing any open debug log file."""
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
