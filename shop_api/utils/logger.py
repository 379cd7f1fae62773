"""
Logging configuration

All loggers in the package hang off the ``shop_api`` logger, which owns the
single stdout handler. Uvicorn's own loggers are left alone.
"""
import logging
import sys
from typing import Optional

from shop_api.config import get_settings

PACKAGE_LOGGER = "shop_api"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(debug: Optional[bool] = None) -> logging.Logger:
    """Attach the stdout handler to the package logger (once) and set its level"""
    if debug is None:
        debug = get_settings().DEBUG

    root = logging.getLogger(PACKAGE_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    root.setLevel(logging.DEBUG if debug else logging.INFO)
    return root


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger instance"""
    configure_logging()
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
