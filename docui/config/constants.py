"""
Centralized constants for docui.
"""

import os
from pathlib import Path

# =============================================================================
# PATHS
# =============================================================================

DOCUI_CONFIG_DIR = Path(os.environ.get("DOCUI_CONFIG_DIR", Path.home() / ".config" / "docui"))

LOG_FILE_NAME = "docui.log"
KEY_LOG_FILE_NAME = "key_events.log"
UI_CONFIG_FILE_NAME = "ui_config.json"
KEYBINDINGS_FILE_NAME = "keybindings.yaml"

# Max log file size: 5MB, keep 2 backups
MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 2

# =============================================================================
# CONTAINER ENGINE
# =============================================================================

DEFAULT_DOCKER_BINARY = "docker"
DOCKER_BINARY_ENV_VAR = "DOCUI_DOCKER_BIN"

# Short id width shown in list panels (same as `docker ps`)
SHORT_ID_LENGTH = 12

# =============================================================================
# LAYOUT
# =============================================================================

DEFAULT_LIST_WIDTH_PCT = 50  # Left column (lists) share of the terminal width
MIN_TERMINAL_WIDTH = 20
MIN_TERMINAL_HEIGHT = 10
