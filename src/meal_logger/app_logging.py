"""Logging configuration helpers."""

import logging


def configure_logging(level: str = "INFO") -> None:
    """Configure the ``meal_logger`` logger with a single stream handler.

    ``level`` is a standard level name such as ``"DEBUG"``; calling again only
    updates the level.
    """
    logger = logging.getLogger("meal_logger")
    logger.setLevel(level.upper())
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False
