"""Logging configuration for applications built on the recipe state."""

import logging
import sys
from typing import Optional

from forkify.config import ForkifyConfig


def setup_logging(log_level: Optional[str] = None) -> None:
    """
    Configure a console handler on the root logger.

    Args:
        log_level: Logging level name (optional, reads FORKIFY_LOG_LEVEL if not provided)
    """
    level_name = (log_level or ForkifyConfig.get_log_level()).upper()
    level = getattr(logging, level_name, logging.INFO)

    logger = logging.getLogger()
    logger.setLevel(level)
    logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s | %(name)-30s | %(levelname)-8s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(console_handler)

    # Quiet noisy libraries
    logging.getLogger("urllib3").setLevel(logging.WARNING)
