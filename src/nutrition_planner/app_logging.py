"""Logging configuration helpers."""

import logging

_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(level: int | str = logging.INFO) -> None:
    """Attach one stream handler to the package logger.

    Repeated calls only update the level, so app factories can call this
    freely.
    """
    logger = logging.getLogger("nutrition_planner")
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    logger.propagate = False
