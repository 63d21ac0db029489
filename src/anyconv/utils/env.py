"""Typed lookups of environment variables."""

import os
from typing import Any

from ..convert import any2kind, string2kind
from ..errors import ConversionError
from ..logging.setup import get_logger

logger = get_logger(__name__)


def get_env_typed(key: str, type_name: str, default: Any = None) -> Any:
    """Get environment variable converted to a named type.

    Args:
        key: Environment variable name
        type_name: Type name understood by ``string2kind`` ("int32", "float64", "time.Time", ...)
        default: Returned when the variable is unset or cannot be converted

    Returns:
        Converted value or default

    Examples:
        ANYCONV_START_DATE="Jan 2, 2024" with type_name "time.Time"
        ANYCONV_BATCH=500 with type_name "int32"
    """
    value = os.getenv(key)
    if not value:
        return default

    try:
        return any2kind(value, string2kind(type_name))
    except ConversionError as e:
        logger.warning(f"Invalid {type_name} value for {key}='{value}', using default {default}: {e}")
        return default


def get_env_int(key: str, default: int = 0) -> int:
    """Get environment variable as integer."""
    return get_env_typed(key, "int", default)


def get_env_float(key: str, default: float = 0.0) -> float:
    """Get environment variable as float."""
    return get_env_typed(key, "float64", default)
