"""
utils/logger.py
---------------
Logging setup for the LightBnB data layer.
Repositories and the db package log through `get_logger(__name__)`; the
surrounding web app can still attach its own handlers to the root logger.
"""

import logging
import sys

from config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def configure_logging(level: str = LOG_LEVEL) -> None:
    """
    Send records to stderr at `level` (a name such as "DEBUG").
    Only the first call has an effect.
    """
    global _configured
    if _configured:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Module logger for the data layer; sets up stderr output on first use."""
    configure_logging()
    return logging.getLogger(name)
