# logging_config.py
#
# Usage in a module:
#   from .logging_config import get_logger
#   logger = get_logger(__name__)
#
# The format is common to the whole package; configure_logging() is called
# once by the entry point, library code only asks for loggers.
import logging

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=DATE_FORMAT)


def get_logger(name: str) -> logging.Logger:
    """
    Returns a module-scoped logger, namespaced by `name`.
    """
    return logging.getLogger(name)
