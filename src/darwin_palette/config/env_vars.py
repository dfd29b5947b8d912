# darwin_palette/config/env_vars.py
"""Environment variable names - centralized, type-safe, no magic strings!

All environment variable access should go through this module.
"""

from __future__ import annotations

import os
from enum import Enum


class EnvVar(str, Enum):
    """All environment variable names used by Darwin palette."""

    # ================================================================
    # Search Configuration
    # ================================================================
    THRESHOLD = "DARWIN_PALETTE_THRESHOLD"
    MAX_RESULTS = "DARWIN_PALETTE_MAX_RESULTS"
    MAX_EMPTY_RESULTS = "DARWIN_PALETTE_MAX_EMPTY_RESULTS"

    # ================================================================
    # Session Configuration
    # ================================================================
    LOCALE = "DARWIN_PALETTE_LOCALE"
    ENTER_POLICY = "DARWIN_PALETTE_ENTER_POLICY"
    MAX_RECENT = "DARWIN_PALETTE_MAX_RECENT"

    # ================================================================
    # Paths and Logging
    # ================================================================
    STORE_PATH = "DARWIN_PALETTE_STORE_PATH"
    LOG_LEVEL = "DARWIN_PALETTE_LOG_LEVEL"
    LOG_FILE = "DARWIN_PALETTE_LOG_FILE"


# ================================================================
# Type-Safe Helper Functions
# ================================================================


def get_env(var: EnvVar, default: str | None = None) -> str | None:
    """Get environment variable value (type-safe).

    Args:
        var: Environment variable enum
        default: Default value if not set

    Returns:
        Environment variable value or default
    """
    return os.getenv(var.value, default)


def get_env_int(var: EnvVar, default: int | None = None) -> int | None:
    """Get environment variable as an int, falling back on parse errors."""
    value = os.getenv(var.value)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        return default


def get_env_float(var: EnvVar, default: float | None = None) -> float | None:
    """Get environment variable as a float, falling back on parse errors."""
    value = os.getenv(var.value)
    if value is None or value.strip() == "":
        return default
    try:
        return float(value)
    except ValueError:
        return default
