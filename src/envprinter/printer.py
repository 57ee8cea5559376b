"""Startup dump of the filtered environment."""

from __future__ import annotations

import logging

from envprinter.core.filter import EnvFilterEngine
from envprinter.utils.logging import get_logger

BANNER = "==============================="
TITLE = "Environment Variables"


def print_environment(engine: EnvFilterEngine, logger: logging.Logger | None = None) -> None:
    """Log every reported variable under a fixed banner.

    Values appear only when the engine's settings enable ``show_values``;
    otherwise each line carries the name alone.
    """
    logger = logger or get_logger("printer")
    if not engine.settings.enabled:
        logger.debug("Environment printer is disabled")
        return

    result = engine.get_filtered_environment()
    logger.info(BANNER)
    logger.info(TITLE)
    logger.info(BANNER)
    for name, value in result.variables.items():
        logger.info("%s = %s", name, value)
    logger.info(BANNER)
