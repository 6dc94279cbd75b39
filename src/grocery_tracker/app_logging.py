"""Logging configuration helpers."""

import logging

# Store operations run on request worker threads, so the thread name is logged.
LOG_FORMAT = "%(asctime)s %(levelname)s [%(threadName)s] %(name)s: %(message)s"


def configure_logging(level: str | int = logging.INFO) -> None:
    """Attach one stream handler to the ``grocery_tracker`` logger.

    Later calls only update the level.
    """
    logger = logging.getLogger("grocery_tracker")
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
