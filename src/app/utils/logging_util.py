import logging
import sys

from src.app.config.settings import settings

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


def _build_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(f"feature_workflow.{name}")
    logger.setLevel(settings.LOG_LEVEL.upper())

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger


loggers = {
    "main": _build_logger("main"),
    "time_tracker": _build_logger("time_tracker"),
}
