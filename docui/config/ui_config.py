"""
docui UI configuration.

Handles the user preferences the TUI reads at start-up: which container
engine binary to drive and how wide the list column is.
Config is stored in ~/.config/docui/ui_config.json
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, TypedDict

from .constants import (
    DEFAULT_DOCKER_BINARY,
    DEFAULT_LIST_WIDTH_PCT,
    DOCKER_BINARY_ENV_VAR,
    DOCUI_CONFIG_DIR,
    UI_CONFIG_FILE_NAME,
)


class LayoutConfig(TypedDict):
    """Panel layout configuration for the TUI."""

    list_width_pct: int


DEFAULT_LAYOUT: LayoutConfig = {
    "list_width_pct": DEFAULT_LIST_WIDTH_PCT,
}

DEFAULT_CONFIG: dict[str, Any] = {
    "docker_binary": DEFAULT_DOCKER_BINARY,
    "layout": {**DEFAULT_LAYOUT},
}


def get_ui_config_path() -> Path:
    """
    Get path to UI config file.

    Returns:
        Path to ~/.config/docui/ui_config.json
    """
    DOCUI_CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    return DOCUI_CONFIG_DIR / UI_CONFIG_FILE_NAME


def load_ui_config() -> dict[str, Any]:
    """
    Load UI configuration from file.

    Returns:
        Config dict, or defaults if file doesn't exist or is invalid
    """
    path = get_ui_config_path()
    if path.exists():
        try:
            config = json.loads(path.read_text())
            if not isinstance(config, dict):
                return DEFAULT_CONFIG.copy()
            # Merge with defaults to handle missing keys
            return {**DEFAULT_CONFIG, **config}
        except (json.JSONDecodeError, OSError):
            return DEFAULT_CONFIG.copy()
    return DEFAULT_CONFIG.copy()


def save_ui_config(config: dict[str, Any]) -> None:
    """
    Save UI configuration to file.

    Args:
        config: Configuration dict to save
    """
    path = get_ui_config_path()
    try:
        path.write_text(json.dumps(config, indent=2) + "\n")
    except OSError:
        # Config is non-critical
        pass


def get_docker_binary() -> str:
    """Container engine binary: $DOCUI_DOCKER_BIN, then config, then "docker"."""
    env_value = os.environ.get(DOCKER_BINARY_ENV_VAR)
    if env_value:
        return env_value
    return str(load_ui_config().get("docker_binary") or DEFAULT_DOCKER_BINARY)


def get_layout() -> LayoutConfig:
    """Get panel layout configuration, merged with defaults."""
    raw = load_ui_config().get("layout", {})
    if not isinstance(raw, dict):
        return {**DEFAULT_LAYOUT}
    merged: LayoutConfig = {**DEFAULT_LAYOUT}
    pct = raw.get("list_width_pct")
    if isinstance(pct, int) and 10 <= pct <= 90:
        merged["list_width_pct"] = pct
    return merged


def set_layout(layout: LayoutConfig) -> None:
    """Persist panel layout configuration."""
    config = load_ui_config()
    config["layout"] = {**layout}
    save_ui_config(config)
