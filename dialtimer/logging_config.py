"""Console (and optional file) logging for the dialtimer package."""
import logging
import sys
from typing import List, Optional

from dialtimer.config import DialSettings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%H:%M:%S"

# Handlers installed by setup_logging, removed again on the next call
_installed: List[logging.Handler] = []


def setup_logging(settings: Optional[DialSettings] = None) -> logging.Logger:
    """Attach handlers to the 'dialtimer' logger according to settings.

    Safe to call more than once (Flet hot reload runs main() again): the
    handlers from the previous call are closed and replaced, handlers added
    by anyone else are left alone.
    """
    settings = settings or DialSettings()
    logger = logging.getLogger("dialtimer")
    logger.setLevel(settings.log_level)

    while _installed:
        handler = _installed.pop()
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if settings.log_file:
        handlers.append(logging.FileHandler(settings.log_file, mode="a", encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        _installed.append(handler)

    logger.debug(f"Logging initialized at {settings.log_level}")
    return logger
