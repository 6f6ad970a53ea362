"""Environment variable names - centralized, type-safe, no magic strings!

All environment variable access should go through this module.
"""

from __future__ import annotations

import os
from enum import Enum


class EnvVar(str, Enum):
    """All environment variable names used by plancli.

    Use these instead of hardcoded strings for type safety.
    """

    # ================================================================
    # API / Auth Configuration
    # ================================================================
    API_HOST = "PLANCLI_API_HOST"
    API_TOKEN = "PLANCLI_API_TOKEN"
    ORG_ID = "PLANCLI_ORG_ID"
    HTTP_TIMEOUT = "PLANCLI_HTTP_TIMEOUT"

    # ================================================================
    # Paths and Filesystem
    # ================================================================
    HOME_DIR = "PLANCLI_HOME"

    # ================================================================
    # Logging
    # ================================================================
    LOG_LEVEL = "PLANCLI_LOG_LEVEL"
    LOG_FILE = "PLANCLI_LOG_FILE"

    # ================================================================
    # System (typically inherited, not set by plancli)
    # ================================================================
    HOME = "HOME"


# ================================================================
# Type-Safe Helper Functions
# ================================================================


def get_env(var: EnvVar, default: str | None = None) -> str | None:
    """Get environment variable value (type-safe).

    Example:
        >>> host = get_env(EnvVar.API_HOST, "https://api.plandex.ai")
    """
    return os.getenv(var.value, default)


def set_env(var: EnvVar, value: str) -> None:
    """Set environment variable (type-safe)."""
    os.environ[var.value] = value


def unset_env(var: EnvVar) -> None:
    """Unset environment variable if it exists."""
    os.environ.pop(var.value, None)


def is_set(var: EnvVar) -> bool:
    """Check if environment variable is set (even if empty string)."""
    return var.value in os.environ


def get_env_int(var: EnvVar, default: int | None = None) -> int | None:
    """Get environment variable as integer.

    Args:
        var: EnvVar enum member
        default: Default value if not set or invalid

    Returns:
        Integer value or default
    """
    value = get_env(var)
    if value is None:
        return default

    try:
        return int(value)
    except ValueError:
        return default


def get_env_float(var: EnvVar, default: float | None = None) -> float | None:
    """Get environment variable as float.

    Args:
        var: EnvVar enum member
        default: Default value if not set or invalid

    Returns:
        Float value or default

    Example:
        >>> timeout = get_env_float(EnvVar.HTTP_TIMEOUT, 30.0)
    """
    value = get_env(var)
    if value is None:
        return default

    try:
        return float(value)
    except ValueError:
        return default


def get_env_bool(var: EnvVar, default: bool = False) -> bool:
    """Get environment variable as boolean.

    Returns:
        Boolean value (true for "1", "true", "yes", "on", case-insensitive)
    """
    value = get_env(var)
    if value is None:
        return default

    return value.lower() in ("1", "true", "yes", "on")
