"""
Settings resolution for routerman.

Each setting is taken from the first source that provides it: command line
argument, environment variable, YAML settings file, built-in default.
"""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from routerman.common.errors import ConfigError

from .constants import (
    CONFIG_FILE,
    DATABASE_FILE,
    DEFAULT_MAX_RATE_KBPS,
    DEFAULT_MIN_RATE_KBPS,
    DEFAULT_PAGE_SIZE,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_ROUTER_URL,
    DEFAULT_ROUTER_USERNAME,
    HISTORY_FILE,
    LOG_FILE,
)

CONFIG_ENV = "ROUTERMAN_CONFIG"

# setting name -> environment variable
ENV_OVERRIDES = {
    "router_url": "ROUTERMAN_ROUTER_URL",
    "router_username": "ROUTERMAN_ROUTER_USERNAME",
    "router_password": "ROUTERMAN_ROUTER_PASSWORD",
    "database": "ROUTERMAN_DATABASE",
    "page_size": "ROUTERMAN_PAGE_SIZE",
}

PATH_SETTINGS = ("database", "history_file", "log_file")
INT_SETTINGS = ("page_size", "min_rate_kbps", "default_max_rate_kbps", "request_timeout")


@dataclass
class Settings:
    """Resolved routerman settings."""
    router_url: str = DEFAULT_ROUTER_URL
    router_username: str = DEFAULT_ROUTER_USERNAME
    router_password: str = ""
    database: Path = DATABASE_FILE
    page_size: int = DEFAULT_PAGE_SIZE
    min_rate_kbps: int = DEFAULT_MIN_RATE_KBPS
    default_max_rate_kbps: int = DEFAULT_MAX_RATE_KBPS
    history_file: Path = HISTORY_FILE
    log_file: Path = LOG_FILE
    request_timeout: int = DEFAULT_REQUEST_TIMEOUT


def get_config_file(arg_path: Optional[str] = None) -> Path:
    """Get the settings file path from args, env, or default."""
    if arg_path:
        return Path(arg_path).expanduser()
    if os.environ.get(CONFIG_ENV):
        return Path(os.environ[CONFIG_ENV]).expanduser()
    return CONFIG_FILE


def load_config_file(config_file: Path) -> dict:
    """
    Load the YAML settings file.

    A missing file yields an empty mapping; anything else that cannot be
    parsed into a mapping raises ConfigError.
    """
    if not config_file.exists():
        return {}
    try:
        with open(config_file) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid settings file {config_file}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {config_file} must contain a mapping")
    return data


def _coerce(name: str, value: Any) -> Any:
    if name in PATH_SETTINGS:
        return Path(str(value)).expanduser()
    if name in INT_SETTINGS:
        try:
            number = int(value)
        except (TypeError, ValueError):
            raise ConfigError(f"Setting '{name}' must be an integer, got {value!r}") from None
        if number < 1:
            raise ConfigError(f"Setting '{name}' must be positive, got {number}")
        return number
    return str(value)


def load_settings(config_path: Optional[str] = None, **overrides: Any) -> Settings:
    """
    Resolve settings from overrides, environment, settings file and defaults.

    Args:
        config_path: Explicit settings file (otherwise ROUTERMAN_CONFIG or default)
        overrides: Values from the command line; None means "not given"

    Returns:
        Fully resolved Settings
    """
    known = {f.name for f in fields(Settings)}
    unknown = set(overrides) - known
    if unknown:
        raise ConfigError(f"Unknown setting(s): {', '.join(sorted(unknown))}")

    file_data = load_config_file(get_config_file(config_path))
    values = {}
    for name in known:
        env_name = ENV_OVERRIDES.get(name)
        if overrides.get(name) is not None:
            values[name] = _coerce(name, overrides[name])
        elif env_name and os.environ.get(env_name):
            values[name] = _coerce(name, os.environ[env_name])
        elif file_data.get(name) is not None:
            values[name] = _coerce(name, file_data[name])

    return Settings(**values)
