"""
This module provides a simple, reusable logger configuration for the application.

Design Rationale:
All modules obtain their logger through `get_logger`, so format and level are
controlled from one place. The level defaults to WARNING (configurable with
`PRISMA_GRAPHQL_LOG_LEVEL`) because the CLI reports its result with plain
status lines on stdout; INFO and DEBUG records are opt-in.
"""

import logging
import sys

from prisma_graphql.utils.config import settings


def get_logger(name: str) -> logging.Logger:
    """
    Configures and returns a logger with a specified name.

    If a logger with the given name has already been configured, the existing
    instance is returned without adding another handler.

    Args:
        name: The name for the logger, typically the module's `__name__`.

    Returns:
        A configured `logging.Logger` instance.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        logger.setLevel(settings.log_level)

        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
