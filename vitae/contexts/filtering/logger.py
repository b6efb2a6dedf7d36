"""
Filtering context logger.

Provides logging interface for the filtering context with automatic [filter] prefix.
All filtering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Iterable

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[filter]"


def setup_filtering_logger(log_dir: Path, selection: Iterable[str] = ()) -> Path:
    """
    Setup logger for the filtering context.

    Args:
        log_dir: Directory for this filtering session
        selection: Labels selected for this session (for provenance)

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="filter",
        log_dir=log_dir,
        extra_provenance={"Selection": ", ".join(sorted(selection)) or "(none)"},
    )


# Wrapper functions with automatic [filter] prefix


def _log_warning(message: str) -> None:
    """Log warning message with [filter] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [filter] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level filtering-specific logging helpers


def log_filter_result(selection: Iterable[str], before: dict, after: dict) -> None:
    """Log how many entries of each collection survived a selection."""
    labels = ", ".join(sorted(selection))
    kept = ", ".join(f"{name} {after[name]}/{before[name]}" for name in before)
    _log_debug(f"Selection [{labels}] kept {kept}")
