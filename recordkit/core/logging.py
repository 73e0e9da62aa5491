"""
Logging Setup
=============

Opt-in logging configuration for applications using the library.
The library itself only emits records through module-level loggers.
"""

import logging
from typing import Optional

from recordkit.config import Settings, get_settings


def setup_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure the root logger (root logger defaults to WARNING).

    Args:
        settings: Settings to read level and format from; defaults to the
            cached instance.
    """
    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.log_level_value,
        format=settings.LOG_FORMAT,
    )
