"""
Document context logger.

Provides logging interface for the document context with automatic [document] prefix.
All document modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[document]"


def setup_document_logger(log_dir: Path, source: str = "") -> Path:
    """
    Setup logger for the document context.

    Args:
        log_dir: Directory for this session
        source: Path or URL of the document being loaded (for provenance)

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="document",
        log_dir=log_dir,
        extra_provenance={"Source": source} if source else None,
    )


# Wrapper functions with automatic [document] prefix


def _log_info(message: str) -> None:
    """Log info message with [document] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [document] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [document] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [document] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [document] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level document-specific logging helpers


def log_load_start(source: str) -> None:
    """Log start of a document load."""
    _log_info(f"Loading resume data from {source}")


def log_load_result(source: str, counts: dict) -> None:
    """Log a successful load with per-collection entry counts."""
    summary = ", ".join(f"{name}={count}" for name, count in counts.items())
    _log_success(f"Loaded {source} ({summary})")


def log_load_failure(source: str, error: Exception) -> None:
    """Log a failed load; the error message may span several lines."""
    _log_error(f"Failed to load {source}")
    for line in str(error).splitlines():
        _log_debug(f"  {line}")
