"""
routerman.config - Settings and validation utilities for routerman.

This package contains:
- constants: Path constants, defaults and context key names
- validation: IPv4 and MAC address validation functions
- settings: Settings dataclass and YAML/env/argument resolution
"""

from .constants import (
    CONFIG_FILE,
    DATABASE_FILE,
    HISTORY_FILE,
    LOG_FILE,
    DEFAULT_PAGE_SIZE,
    USER_ID,
    SLOT_ID,
    DEVICE_ID,
    QUIT,
)

from .validation import (
    validate_ipv4,
    validate_mac,
    normalize_mac,
    ip_to_int,
    int_to_ip,
)

from .settings import (
    Settings,
    get_config_file,
    load_config_file,
    load_settings,
)

__all__ = [
    # Constants
    'CONFIG_FILE',
    'DATABASE_FILE',
    'HISTORY_FILE',
    'LOG_FILE',
    'DEFAULT_PAGE_SIZE',
    'USER_ID',
    'SLOT_ID',
    'DEVICE_ID',
    'QUIT',
    # Validation
    'validate_ipv4',
    'validate_mac',
    'normalize_mac',
    'ip_to_int',
    'int_to_ip',
    # Settings
    'Settings',
    'get_config_file',
    'load_config_file',
    'load_settings',
]
