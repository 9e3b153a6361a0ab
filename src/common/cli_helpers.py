"""Common CLI helper utilities."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path


def setup_logging(level: int = logging.INFO) -> None:
    """Configure standard logging format for CLI tools."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def positive_int(value: str) -> int:
    """Parse a strictly positive integer for argparse arguments.

    Raises:
        argparse.ArgumentTypeError: If the value is not an integer above zero.
    """
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {parsed}")
    return parsed


def positive_float(value: str) -> float:
    """Parse a strictly positive number for argparse arguments."""
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected a number, got {value!r}") from exc
    if not parsed > 0 or parsed == float("inf"):
        raise argparse.ArgumentTypeError(f"expected a positive number, got {value}")
    return parsed


def require_directory(value: str | None, flag: str = "--in") -> Path:
    """Resolve a required input directory.

    Args:
        value: Raw argument value (may be None or empty).
        flag: Flag name used in error messages.

    Returns:
        The directory as a Path.

    Raises:
        ValueError: If no directory was given or it does not exist.
    """
    if not value:
        raise ValueError(f"input directory required ({flag})")
    path = Path(value)
    if not path.is_dir():
        raise ValueError(f"input directory not found: {path}")
    return path
