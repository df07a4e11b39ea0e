# procshade/log.py
import logging
import os
from typing import Optional

LOG_LEVEL_ENV_VAR = "PROCSHADE_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


def resolve_log_level_name(default: str = "WARNING") -> str:
    value = os.getenv(LOG_LEVEL_ENV_VAR)
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()


def configure_logging(level_name: Optional[str] = None) -> logging.Logger:
    """
    Attaches a console handler to the package logger if it has none yet.
    """
    logger = logging.getLogger("procshade")
    level_name = (level_name or resolve_log_level_name()).upper()
    logger.setLevel(_LEVELS.get(level_name, logging.WARNING))

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
