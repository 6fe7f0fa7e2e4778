"""
Configuration management for corsprobe.

Supports multiple configuration sources in order of priority:
1. Command-line options (handled by the CLI)
2. Environment variables
3. Global config file (~/.corsprobe/config.yml)
4. Default values (lowest priority)
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from corsprobe.modules.scanner.models import DEFAULT_USER_AGENT

logger = logging.getLogger(__name__)

ENV_KEYS = (
    "CORSPROBE_METHOD",
    "CORSPROBE_CONCURRENCY",
    "CORSPROBE_TIMEOUT",
    "CORSPROBE_OUTPUT",
    "CORSPROBE_USER_AGENT",
    "CORSPROBE_VERBOSE",
)

DEFAULT_METHOD = "GET"
DEFAULT_CONCURRENCY = 5
DEFAULT_TIMEOUT = 10.0
DEFAULT_OUTPUT = "cors_results.txt"

TRUTHY = {"1", "true", "yes", "on"}


def get_global_config_path() -> Path:
    return Path.home() / ".corsprobe" / "config.yml"


def load_global_config() -> dict[str, Any]:
    """Load global configuration from ~/.corsprobe/config.yml."""
    config_path = get_global_config_path()
    if not config_path.exists():
        return {}
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Could not load config file %s: %s", config_path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config file %s: expected a mapping", config_path)
        return {}
    return data


def get_config(key: str, default: Any = None) -> Any:
    """
    Get configuration value with priority:
    1. Environment variable
    2. Global config file
    3. Default value
    """
    env_value = os.environ.get(key)
    if env_value:
        return env_value

    global_config = load_global_config()
    value = global_config.get(key)
    if value is not None and value != "":
        return value

    return default


def _get_int(key: str, default: int) -> int:
    value = get_config(key, default)
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning("Invalid integer for %s: %r, using %d", key, value, default)
        return default


def _get_float(key: str, default: float) -> float:
    value = get_config(key, default)
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning("Invalid number for %s: %r, using %s", key, value, default)
        return default


def get_default_method() -> str:
    return str(get_config("CORSPROBE_METHOD", DEFAULT_METHOD)).strip().upper() or DEFAULT_METHOD


def get_default_concurrency() -> int:
    return max(1, _get_int("CORSPROBE_CONCURRENCY", DEFAULT_CONCURRENCY))


def get_default_timeout() -> float:
    timeout = _get_float("CORSPROBE_TIMEOUT", DEFAULT_TIMEOUT)
    return timeout if timeout > 0 else DEFAULT_TIMEOUT


def get_default_output() -> str:
    return str(get_config("CORSPROBE_OUTPUT", DEFAULT_OUTPUT))


def get_user_agent() -> str:
    return str(get_config("CORSPROBE_USER_AGENT", DEFAULT_USER_AGENT))


def is_verbose_env() -> bool:
    """Resolve verbose mode from config sources."""
    return str(get_config("CORSPROBE_VERBOSE", "")).strip().lower() in TRUTHY
