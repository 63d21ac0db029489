"""Logging package."""

from .setup import get_logger, setup_logging

__all__ = ["setup_logging", "get_logger"]
