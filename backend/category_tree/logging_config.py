"""Logging configuration.

Sets up console logging for the ``category_tree`` logger hierarchy.
"""

import logging

from category_tree.config import Settings

LOGGER_NAME = "category_tree"


def setup_logging(config: Settings) -> logging.Logger:
    """Set up application logging with a console handler.

    Args:
        config: Application settings containing the log level.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.log_level.upper())

    # Clear any existing handlers (in case this is called multiple times)
    logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(config.log_level.upper())
    console_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(console_handler)

    return logger
