"""
Logging configuration.

All services log through the ``food_safety_reports`` logger; components that
want their own prefix use ``get_logger("notifications")`` which returns a
child of it and shares the console handler.
"""
import logging
import os
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Root application logger
logger = logging.getLogger("food_safety_reports")
logger.setLevel(LOG_LEVEL)

# Console handler
console_handler = logging.StreamHandler(sys.stdout)
console_handler.setLevel(LOG_LEVEL)
console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

if not logger.handlers:
    logger.addHandler(console_handler)


def get_logger(component: str) -> logging.Logger:
    """Child logger for a single component (e.g. ``scoring``)."""
    return logger.getChild(component)
