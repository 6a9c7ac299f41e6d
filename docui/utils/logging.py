"""Logging setup for docui.

Standard Logger Initialization Pattern
--------------------------------------
Modules use the standard Python pattern:

    import logging
    logger = logging.getLogger(__name__)

The TUI owns the terminal, so nothing may log to stderr while it runs.
`setup_tui_logging()` routes everything to rotating files under
~/.config/docui instead.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from docui.config.constants import (
    DOCUI_CONFIG_DIR,
    KEY_LOG_FILE_NAME,
    LOG_BACKUP_COUNT,
    LOG_FILE_NAME,
    MAX_LOG_BYTES,
)

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_tui_logging(
    verbose: bool = False, log_dir: Optional[Path] = None
) -> tuple[logging.Logger, logging.Logger]:
    """
    Set up file logging for the TUI.

    The root logger is set to WARNING to avoid noise from third-party libs.
    docui's own loggers (docui.*) are set to INFO, or DEBUG when verbose.
    Key events get a separate file; each dispatched key is logged at DEBUG,
    so the file stays empty unless verbose.

    Returns:
        tuple: (main_logger, key_events_logger)
    """
    log_dir = log_dir or DOCUI_CONFIG_DIR
    level = logging.DEBUG if verbose else logging.INFO

    try:
        log_dir.mkdir(parents=True, exist_ok=True)

        root = logging.getLogger()
        if not root.handlers:
            handler = RotatingFileHandler(
                log_dir / LOG_FILE_NAME, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUP_COUNT
            )
            handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
            logging.basicConfig(level=logging.WARNING, handlers=[handler])

        logging.getLogger("docui").setLevel(level)

        key_logger = logging.getLogger("key_events")
        if not key_logger.handlers:
            key_handler = RotatingFileHandler(
                log_dir / KEY_LOG_FILE_NAME, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUP_COUNT
            )
            key_handler.setFormatter(logging.Formatter("%(asctime)s - %(message)s"))
            key_logger.addHandler(key_handler)
            key_logger.propagate = False
        key_logger.setLevel(level)

        return logging.getLogger("docui"), key_logger

    except OSError as e:
        # We can't log this failure since logging is what's failing
        print(f"Warning: TUI logging setup failed: {e}", file=sys.stderr)
        return logging.getLogger("docui"), logging.getLogger("key_events")
