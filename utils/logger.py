import logging
from typing import Optional

LOG_LEVELS = {"NONE": logging.CRITICAL + 1, "BASIC": logging.INFO, "DETAILED": logging.DEBUG}

_GENERATION_LOGGER_NAME = "modules.dungeon"
_GENERATION_LOGGER: Optional[logging.Logger] = None


def get_generation_logger(level: str = "BASIC") -> logging.Logger:
    """Return the shared logger of the dungeon generator, attaching a console handler once.

    ``level`` is one of :data:`LOG_LEVELS`. Library modules log through child
    loggers (``modules.dungeon.*``) and never configure handlers themselves.
    """

    global _GENERATION_LOGGER
    try:
        numeric_level = LOG_LEVELS[level.upper()]
    except KeyError as exc:
        raise ValueError(f"unknown log level '{level}'") from exc

    logger = _GENERATION_LOGGER or logging.getLogger(_GENERATION_LOGGER_NAME)
    logger.setLevel(numeric_level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[dungeon] %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setLevel(numeric_level)

    logger.propagate = True
    _GENERATION_LOGGER = logger
    return logger
