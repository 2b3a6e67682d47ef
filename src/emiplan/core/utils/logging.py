"""
Log routing for emiplan.

The engine logs through loguru's global ``logger`` (skipped and unpayable
prepayments at WARNING, per-event pricing at DEBUG) and never adds sinks.
The CLI calls configure_logging() once per invocation, driven by the
``logging`` section of the config.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from emiplan.core.config import Config

CONSOLE_FORMAT = "<level>{level: <7}</level> {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {module}:{line} | {message}"

# Log files hold a few runs of per-event traces at most.
FILE_ROTATION = "1 MB"
FILE_RETENTION = 3


def configure_logging(config: Config, level: str | None = None) -> str:
    """
    Replace loguru's sinks with the ones the config asks for.

    Args:
        config: Loaded configuration; ``logging.level`` and ``logging.file``
            are read from its validated form.
        level: Overrides ``logging.level`` (the ``--log-level`` flag).

    Returns:
        The level that was applied.
    """
    settings = config.validated().logging
    applied = (level or settings.level).upper()

    logger.remove()
    logger.add(sys.stderr, level=applied, format=CONSOLE_FORMAT)

    if settings.file:
        logger.add(
            os.path.expanduser(settings.file),
            level=applied,
            format=FILE_FORMAT,
            rotation=FILE_ROTATION,
            retention=FILE_RETENTION,
        )
    return applied
