"""Configuration package."""

from .settings import AnyConvConfig, config

__all__ = ["AnyConvConfig", "config"]
