# SPDX-License-Identifier: MIT

"""Loguru setup shared by the CLI and anything embedding the library."""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str = "WARNING", log_dir: Optional[Path] = None) -> None:
    """
    Replace loguru's default sink.

    Logs go to stderr at the given level. When log_dir is set, a rotating
    DEBUG log file is written there as well.
    """
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT, colorize=True)

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_dir / "numpad.log",
            level="DEBUG",
            rotation="5 MB",
            retention="14 days",
            encoding="utf-8",
        )
