"""
Service configuration management.

Handles loading and validating settings from environment variables.
"""

import logging
import os

from .engine.codec import DEFAULT_ALLOCATION_PREFIX_LENGTH
from .engine.planner import DEFAULT_MAX_SUBNETS

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",  # Local browser client
    "http://localhost:5173",  # Local dev server
]

DEFAULT_MAX_BATCH_ADDRESSES = 1000

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _get_positive_int(name: str, default: int) -> int:
    value_str = os.getenv(name, "").strip()
    if not value_str:
        return default

    try:
        value = int(value_str)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got '{value_str}'") from e

    if value < 1:
        raise ValueError(f"{name} must be at least 1, got {value}")

    return value


def get_cors_origins() -> list[str]:
    """
    Get allowed CORS origins from environment.

    Returns:
        List[str]: Origins from CORS_ORIGINS, or localhost defaults for development
    """
    origins_str = os.getenv("CORS_ORIGINS", "").strip()

    origins = [origin.strip() for origin in origins_str.split(",") if origin.strip()]

    if not origins:
        return list(DEFAULT_CORS_ORIGINS)

    return origins


def get_log_level() -> int:
    """
    Get logging level from environment.

    Returns:
        int: logging level (default: INFO)

    Raises:
        ValueError: If LOG_LEVEL is not a valid level name
    """
    level = os.getenv("LOG_LEVEL", "INFO").strip().upper()

    if level not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid LOG_LEVEL: '{level}'. Valid options: {', '.join(VALID_LOG_LEVELS)}")

    return getattr(logging, level)


def get_max_subnets() -> int:
    """
    Get the ceiling on subnets generated by a single plan request.

    Returns:
        int: PLAN_MAX_SUBNETS (default: 4096)
    """
    return _get_positive_int("PLAN_MAX_SUBNETS", DEFAULT_MAX_SUBNETS)


def get_max_batch_addresses() -> int:
    """Get the maximum number of entries accepted by one batch request."""
    return _get_positive_int("BATCH_MAX_ADDRESSES", DEFAULT_MAX_BATCH_ADDRESSES)


def get_allocation_prefix_length() -> int:
    """
    Get the allocation boundary used to count subnets per allocation.

    Returns:
        int: ALLOCATION_PREFIX_LENGTH (default: 48)

    Raises:
        ValueError: If the value is not an integer in 0-128
    """
    value_str = os.getenv("ALLOCATION_PREFIX_LENGTH", "").strip()
    if not value_str:
        return DEFAULT_ALLOCATION_PREFIX_LENGTH

    try:
        value = int(value_str)
    except ValueError as e:
        raise ValueError(f"ALLOCATION_PREFIX_LENGTH must be an integer, got '{value_str}'") from e

    if not 0 <= value <= 128:
        raise ValueError(f"ALLOCATION_PREFIX_LENGTH must be between 0 and 128, got {value}")

    return value


def validate_configuration():
    """
    Validate configuration at startup.

    Raises:
        ValueError: If configuration is invalid
    """
    get_log_level()
    get_max_subnets()
    get_max_batch_addresses()
    get_allocation_prefix_length()
