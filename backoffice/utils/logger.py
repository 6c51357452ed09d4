"""
Logging configuration

Every module in the package logs through a child of the "backoffice"
logger, so a single stdout handler covers services and API routes alike.
"""
import logging
import sys
from typing import Optional

from backoffice.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
ROOT_LOGGER_NAME = "backoffice"


def configure_logging(debug: Optional[bool] = None) -> logging.Logger:
    """Attach the stdout handler to the package logger and set its level"""
    if debug is None:
        debug = get_settings().DEBUG

    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    root.setLevel(logging.DEBUG if debug else logging.INFO)
    return root


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger nested under the package logger"""
    configure_logging()
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
