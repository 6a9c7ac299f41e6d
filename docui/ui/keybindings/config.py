"""
Keybinding configuration loader.

Loads user keybinding customizations from ~/.config/docui/keybindings.yaml
and applies them to a KeybindingTable after the panels have bound their
defaults.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from docui.config.constants import DOCUI_CONFIG_DIR, KEYBINDINGS_FILE_NAME

from .keys import parse_key
from .table import GLOBAL_SCOPE, KeybindingTable

logger = logging.getLogger(__name__)

# Default config path
DEFAULT_CONFIG_PATH = DOCUI_CONFIG_DIR / KEYBINDINGS_FILE_NAME

# Example config content for new users
EXAMPLE_CONFIG = """# docui keybinding configuration
#
# Format:
#   overrides:
#     - key: "x"                  # The key to bind ("ctrl+x", "alt+x" work too)
#       action: "remove_image"    # The action to bind to that key
#       panel: "images"           # Where this binding applies
#       replace: "d"              # Optional: an old key of the action to drop
#
# An override adds a key; the action keeps its other keys (enter and o both
# inspect, q and ctrl+c both quit) unless one is named in "replace".
#
# Available panels:
#   global      - Any panel (next_panel, previous_panel, quit)
#   images      - Image list
#   containers  - Container list
#   volumes     - Volume list
#   networks    - Network list
#   detail      - Detail panel
#
# To see all actions and their keys, run: docui keybindings
#
# Example: remove images with x instead of d
# overrides:
#   - key: "x"
#     action: "remove_image"
#     panel: "images"
#     replace: "d"

overrides: []
"""


def get_config_path() -> Path:
    """Get the path to the keybindings config file."""
    return DEFAULT_CONFIG_PATH


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load keybinding configuration from YAML file.

    Returns:
        Dictionary with configuration, or {"overrides": []} if the file
        doesn't exist or can't be read
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        return {"overrides": []}

    try:
        with open(config_path) as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to load keybindings config: {e}")
        return {"overrides": []}

    if not isinstance(config, dict):
        return {"overrides": []}
    return config


def save_example_config(path: Optional[Path] = None) -> bool:
    """
    Save example config file if it doesn't exist.

    Returns:
        True if file was created, False if it already exists or can't be written
    """
    config_path = path or get_config_path()

    if config_path.exists():
        return False

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(EXAMPLE_CONFIG)
        logger.info(f"Created example keybindings config at {config_path}")
        return True
    except OSError as e:
        logger.error(f"Failed to create keybindings config: {e}")
        return False


def parse_overrides(config: Dict[str, Any]) -> List[Dict[str, str]]:
    """
    Pull the well-formed override entries out of a loaded config.

    Entries missing a key or action are logged and dropped; panel defaults
    to "global". "replace" is only kept when given.
    """
    overrides = config.get("overrides") or []
    if not isinstance(overrides, list):
        logger.warning("keybindings config: 'overrides' is not a list, ignoring")
        return []

    parsed = []
    for override in overrides:
        if not isinstance(override, dict) or not override.get("key") or not override.get("action"):
            logger.warning(f"Invalid keybinding override, skipping: {override!r}")
            continue
        parsed.append(
            {
                "key": str(override["key"]),
                "action": str(override["action"]),
                "panel": str(override.get("panel") or GLOBAL_SCOPE),
            }
        )
        if override.get("replace"):
            parsed[-1]["replace"] = str(override["replace"])
    return parsed


def apply_overrides(table: KeybindingTable, overrides: List[Dict[str, str]]) -> int:
    """
    Add the override keys to the table.

    Unknown panels and actions are logged and skipped.

    Returns:
        Number of overrides applied
    """
    applied = 0
    scopes = set(table.scopes())
    for override in overrides:
        panel = override["panel"]
        if panel not in scopes:
            logger.warning(f"Unknown panel '{panel}' in keybinding override, skipping")
            continue
        key, modifier = parse_key(override["key"])
        replace = parse_key(override["replace"]) if override.get("replace") else None
        if not table.rebind(panel, override["action"], key, modifier, replace):
            logger.warning(f"Unknown action '{override['action']}' for panel '{panel}', skipping")
            continue
        logger.info(f"Keybinding override: {panel}.{override['action']} -> {override['key']}")
        applied += 1
    return applied


def load_overrides(table: KeybindingTable, path: Optional[Path] = None) -> int:
    """Load the user's config file and apply it to the table."""
    return apply_overrides(table, parse_overrides(load_config(path)))
