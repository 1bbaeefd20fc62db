"""
Environment configuration.

    GAMEFLOW_ENV                    development | production
    GAMEFLOW_LOG_LEVEL              level name for configure_logging()
    GAMEFLOW_DEFAULT_NUM_PLAYERS    player count when none is given
"""

from __future__ import annotations
import logging
import os

GAMEFLOW_ENV = os.getenv("GAMEFLOW_ENV", "development")
GAMEFLOW_LOG_LEVEL = os.getenv("GAMEFLOW_LOG_LEVEL", "WARNING")
DEFAULT_NUM_PLAYERS = int(os.getenv("GAMEFLOW_DEFAULT_NUM_PLAYERS", "2"))

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """
    Attach a stream handler to the "gameflow" logger.

    Calling it again only updates the level.
    """
    if level is None:
        level = GAMEFLOW_LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logger = logging.getLogger("gameflow")
    if not any(getattr(h, "_gameflow", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._gameflow = True
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
