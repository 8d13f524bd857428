"""
Logging setup for the CLI process.

Modules log through ``logging.getLogger(__name__)``; only the entry point
decides where records go.
"""
import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """
    Install a single stream handler on the ``storefront`` logger.

    Args:
        level: Level name, e.g. "INFO" or "DEBUG"
    """
    logger = logging.getLogger("storefront")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level.upper())
