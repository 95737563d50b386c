"""
Configuration constants for routerman.

Paths and default values used across the configuration system.
"""

from pathlib import Path


# Settings, state and history paths
CONFIG_FILE = Path.home() / ".config" / "routerman" / "routerman.yaml"
STATE_DIR = Path.home() / ".routerman"
DATABASE_FILE = STATE_DIR / "routerman.db"
HISTORY_FILE = STATE_DIR / "history"
LOG_FILE = STATE_DIR / "logs" / "routerman.log"

# Router defaults
DEFAULT_ROUTER_URL = "http://192.168.0.1"
DEFAULT_ROUTER_USERNAME = "admin"
DEFAULT_REQUEST_TIMEOUT = 10

# Menu and bandwidth defaults
DEFAULT_PAGE_SIZE = 5
DEFAULT_MIN_RATE_KBPS = 50
DEFAULT_MAX_RATE_KBPS = 1000

# Context keys bound by list screens
USER_ID = "userId"
SLOT_ID = "slotId"
DEVICE_ID = "deviceId"
QUIT = "quit"
