from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of the user's run preferences as JSON in the
application data directory, with default fallback.
"""

import json
import logging
import os
from typing import Any, Dict

from treeforge.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"
CURRENT_CONFIG_VERSION = "1.0.0"

PLATFORM_CHOICES = ("auto", "windows", "posix")


def get_config_path() -> str:
    """Absolute location of the persisted configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.
    This dictionary drives the behavior of a build run.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Target
        "output_base_dir": "",
        "platform": "auto",

        # Execution
        "dry_run": False,

        # Diagnostics
        "debug": False,
        "log_file": "",
        "json_output": False,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """
    Load the persisted configuration merged over the defaults.

    Unknown keys are dropped; a missing or corrupted file yields the defaults.

    Returns:
        Dict[str, Any]: The effective configuration.
    """
    defaults = get_default_config()
    path = get_config_path()

    if not os.path.exists(path):
        logger.debug("Config file not found. Returning defaults.")
        return defaults

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return defaults

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return defaults

    session = data.get("last_session", {})
    if isinstance(session, dict):
        for key in defaults:
            if key in session:
                defaults[key] = session[key]
    return defaults


def save_config(config: Dict[str, Any]) -> bool:
    """
    Persist the provided configuration as the last session.

    Args:
        config: The configuration dictionary to save.

    Returns:
        bool: True when the file was written.
    """
    path = get_config_path()
    state = {
        "version": CURRENT_CONFIG_VERSION,
        "last_session": {k: config[k] for k in get_default_config() if k in config},
    }
    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {path}")
        return True
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False
