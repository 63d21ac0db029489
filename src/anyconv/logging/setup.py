"""Loguru sinks for applications that want anyconv's log output."""

import sys
from pathlib import Path
from typing import Any

from loguru import logger

from ..config.settings import config

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}"


def setup_logging(
    level: str | None = None,
    log_file: Path | str | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days"
) -> None:
    """Replace loguru's handlers with a stderr sink and an optional rotating file.

    Args:
        level: Log level; defaults to config.log_level
        log_file: Path to log file; defaults to config.log_file
        rotation: Log rotation setting
        retention: Log retention period
    """
    logger.remove()

    level = level or config.log_level
    log_file = log_file or config.log_file

    logger.add(sys.stderr, level=level, format=LOG_FORMAT, catch=True)

    if log_file:
        logger.add(
            Path(log_file),
            level=level,
            format=LOG_FORMAT,
            rotation=rotation,
            retention=retention,
            encoding="utf-8",
            catch=True
        )


def get_logger(name: str) -> Any:
    """Get a logger bound to name (typically __name__)."""
    return logger.bind(name=name)
