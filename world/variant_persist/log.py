"""
Logging setup for the variant persistence add-on.

Every module logs through a child of the "variant_persist" logger so the
host's log shows one prefixed stream for the add-on.
"""

import logging
from typing import Optional

from world.variant_persist.config import get_config

ROOT_LOGGER_NAME = "variant_persist"

_handler: Optional[logging.Handler] = None


def get_logger(name: str) -> logging.Logger:
    """Return the add-on logger for a module, e.g. get_logger("scenario")."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(debug: Optional[bool] = None) -> logging.Logger:
    """
    Configure the add-on logger with debug vs info level.

    Safe to call more than once; the handler is installed only once and
    its format is refreshed from the active config.

    Args:
        debug: Force debug level; None uses the active config's flag

    Returns:
        The add-on root logger
    """
    global _handler

    config = get_config()
    if debug is None:
        debug = config.debug

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    fmt = f"%(asctime)s [%(levelname)5s] {config.log_prefix} %(name)s: %(message)s"
    if _handler is None:
        _handler = logging.StreamHandler()
        logger.addHandler(_handler)
    _handler.setFormatter(logging.Formatter(fmt))
    return logger
