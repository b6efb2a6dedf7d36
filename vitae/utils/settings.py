"""
Runtime settings for VITAE.

Paths come from the environment (.env supported), tunable behaviour from
a YAML settings file loaded with OmegaConf and merged over built-in defaults.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import ConfigKeyError

load_dotenv()
RESUME_DATA_PATH = Path(os.getenv("RESUME_DATA_PATH", "data/resume_data.json"))
SETTINGS_PATH = Path(os.getenv("VITAE_SETTINGS_PATH", "configs/settings.yaml"))
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

DEFAULT_SETTINGS = {
    "labels": {
        # Undeclared labels in content fail the load instead of warning
        "strict": False,
    },
    "fetch": {
        "timeout_seconds": 10,
    },
}


def load_settings(settings_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load settings, merging the YAML file (if present) over DEFAULT_SETTINGS.

    Args:
        settings_path: Optional path to settings YAML (defaults to SETTINGS_PATH)

    Returns:
        Plain dict of resolved settings

    Raises:
        ValueError: If the settings file has keys not present in the defaults
    """
    if settings_path is None:
        settings_path = SETTINGS_PATH

    base = OmegaConf.create(DEFAULT_SETTINGS)
    OmegaConf.set_struct(base, True)

    if settings_path.exists():
        overrides = OmegaConf.load(settings_path)
        try:
            base = OmegaConf.merge(base, overrides)
        except ConfigKeyError as e:
            raise ValueError(f"Invalid settings file {settings_path}: {e}") from e

    return OmegaConf.to_container(base, resolve=True)
