"""Utilities package."""

from .env import get_env_float, get_env_int, get_env_typed

__all__ = [
    "get_env_typed",
    "get_env_int",
    "get_env_float",
]
