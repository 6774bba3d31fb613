"""Application constants and paths for DualTransfer."""

import os
from pathlib import Path

# Application metadata
APP_NAME = "DualTransfer"
APP_VERSION = "1.0.0"
CONFIG_VERSION = 1

# Base paths
APPDATA_ROOT = Path(os.environ.get("APPDATA") or Path.home() / ".config") / APP_NAME
CONFIG_DIR = APPDATA_ROOT
LOGS_DIR = APPDATA_ROOT / "logs"

# File paths
CONFIG_FILE = CONFIG_DIR / "config.json"
DEBUG_LOG_FILE = LOGS_DIR / "debug.log"
AUDIT_LOG_FILE = LOGS_DIR / "audit.log"

# Logging settings
DEBUG_LOG_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
DEBUG_LOG_BACKUP_COUNT = 3

# Pagination
DEFAULT_PAGE_SIZE = 10

# Move ordering policies accepted in settings
VALID_MOVE_ORDERS = frozenset({"prepend", "append"})

# Default settings
DEFAULT_SETTINGS = {
    "pagination": True,
    "page_size": DEFAULT_PAGE_SIZE,
    "move_order": "prepend",
    "show_search": True,
    "one_way": False,
    "display_name": APP_NAME,
}

# Default list titles and operation button texts (left, right)
DEFAULT_TITLES = ("Source", "Target")
DEFAULT_OPERATIONS = (">", "<")
