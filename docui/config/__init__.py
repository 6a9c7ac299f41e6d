"""Configuration for docui."""

from .constants import DOCUI_CONFIG_DIR
from .ui_config import get_docker_binary, get_layout, load_ui_config, save_ui_config

__all__ = [
    "DOCUI_CONFIG_DIR",
    "get_docker_binary",
    "get_layout",
    "load_ui_config",
    "save_ui_config",
]
