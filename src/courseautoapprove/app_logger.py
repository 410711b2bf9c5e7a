import logging

from courseautoapprove.core.config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
ROOT_LOGGER = "courseautoapprove"

def setup_logging(level: str | None = None):
    level_value = getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO)

    # Configure root once
    logging.basicConfig(level=level_value, format=LOG_FORMAT)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level_value)

    # Avoid duplicate console handlers
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        ch = logging.StreamHandler()
        ch.setFormatter(logging.Formatter(LOG_FORMAT))
        ch.setLevel(logger.level)
        logger.addHandler(ch)

    logger.propagate = False
    return logger

def get_logger(name: str | None = None) -> logging.Logger:
    base = logging.getLogger(ROOT_LOGGER)
    if name and name.startswith(ROOT_LOGGER + "."):
        name = name[len(ROOT_LOGGER) + 1:]
    return base.getChild(name) if name and name != ROOT_LOGGER else base
