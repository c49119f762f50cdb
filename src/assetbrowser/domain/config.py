from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of the last scan settings and user-defined
extension stacks using JSON. Missing or corrupted files fall back to defaults.
"""

import json
import logging
import os
from typing import Any, Dict, List

from assetbrowser.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE = os.path.join(get_user_data_dir(), "config.json")
CURRENT_CONFIG_VERSION = "1.0.0"

# Order matters: an entry that is a suffix of a later one would shadow it,
# so compound suffixes such as '.doc.html' come first.
DEFAULT_STACKS: Dict[str, List[str]] = {
    "JS Snippets": [".doc.html", ".html", ".js", ".css", ".json", ".properties", ".txt"],
    "Java Snippets": [".doc.html", ".jsp", ".java", ".properties"],
    "XPages Snippets": [".doc.html", ".xsp", ".properties"],
    "API Explorer": [".json"],
    "Documentation": [".md", ".rst", ".txt"],
}

DEFAULT_STACK_KEY = "JS Snippets"


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default scan configuration.

    'extensions' set to None selects "any extension" mode.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "input_path": os.getcwd(),
        "extensions": list(DEFAULT_STACKS[DEFAULT_STACK_KEY]),
        "stack": "",
        "show_progress": False,
        "json_output": False,
        "tree_file": "",
    }


def get_default_app_state() -> Dict[str, Any]:
    return {
        "version": CURRENT_CONFIG_VERSION,
        "last_session": get_default_config(),
        "custom_stacks": {},
    }


def get_stacks(state: Dict[str, Any]) -> Dict[str, List[str]]:
    """Merge built-in stacks with the user's custom stacks (custom wins)."""
    stacks = {name: list(exts) for name, exts in DEFAULT_STACKS.items()}
    for name, exts in (state.get("custom_stacks") or {}).items():
        if isinstance(exts, list):
            stacks[str(name)] = [str(e) for e in exts]
    return stacks


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_app_state() -> Dict[str, Any]:
    """
    Load application state from disk.

    Returns:
        Dict[str, Any]: The loaded state merged over defaults, or the defaults
                        if the file is missing or unreadable.
    """
    default_state = get_default_app_state()

    if not os.path.exists(CONFIG_FILE):
        logger.debug("Config file not found. Returning defaults.")
        return default_state

    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return default_state

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return default_state

    state = default_state
    if isinstance(data.get("last_session"), dict):
        state["last_session"].update(data["last_session"])
    if isinstance(data.get("custom_stacks"), dict):
        state["custom_stacks"].update(data["custom_stacks"])
    state["version"] = CURRENT_CONFIG_VERSION
    return state


def save_app_state(state: Dict[str, Any]) -> None:
    """Persist application state to disk. Failures are logged, not raised."""
    try:
        os.makedirs(os.path.dirname(CONFIG_FILE), exist_ok=True)
        state["version"] = CURRENT_CONFIG_VERSION
        with open(CONFIG_FILE, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {CONFIG_FILE}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")


# -----------------------------------------------------------------------------
# Facade API
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """Retrieve the last session's configuration merged over defaults."""
    state = load_app_state()
    defaults = get_default_config()
    defaults.update(state.get("last_session", {}))
    return defaults


def save_config(config: Dict[str, Any]) -> None:
    state = load_app_state()
    state["last_session"] = config
    save_app_state(state)
