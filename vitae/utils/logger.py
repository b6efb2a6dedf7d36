"""
Logging setup for VITAE sessions.

Library modules never add sinks; they log through the prefixed wrappers in
contexts/{context}/logger.py and loguru's default handler. A script that wants
a session log calls the context's setup function, which lands here: the
default handler is replaced by a per-session log file plus a console sink on
stderr (stdout carries the script's actual output, e.g. rendered markdown).
"""

import sys
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional

from loguru import logger

import vitae

# Console colors per level; INFO keeps loguru's default
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"


def session_log_dir(logs_root: Path, session_name: str) -> Path:
    """
    Build a timestamped directory for one logging session.

    Example:
        session_log_dir(Path("outs/logs"), "filter")
        # Path("outs/logs/filter_20261019_142501")
    """
    return logs_root / f"{session_name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, str]] = None,
) -> Path:
    """
    Route loguru output to a session log file and the console.

    The file sink records everything from DEBUG up; the console only shows
    INFO and above. A provenance header is written first.

    Args:
        context_name: Context identifier, used as the log file name ("document", "filter")
        log_dir: Directory for this session (created if missing)
        extra_provenance: Session details for the header (e.g., {"Source": "data/resume_data.json"})

    Returns:
        Path to log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()

    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: Optional[Dict[str, str]] = None) -> None:
    """Write a header recording how this session was started."""
    header = {
        "VITAE": vitae.__version__,
        "Command": " ".join(sys.argv),
        "Working directory": str(Path.cwd()),
        "Python": sys.version.split()[0],
        **(extra_context or {}),
    }

    logger.info("=" * 80)
    for key, value in header.items():
        logger.info(f"{key}: {value}")
    logger.info("=" * 80)
