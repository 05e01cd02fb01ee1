"""Logging setup for applications embedding pixcore.

The library itself only attaches a NullHandler; call ``setup_logging`` to
see its records.
"""

import logging

from pixcore.schemas import PixcoreConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(config: PixcoreConfig) -> logging.Logger:
    """Attach a stream handler to the ``pixcore`` logger at the configured level.

    Calling it again replaces the handler rather than adding a second one.
    """
    level = getattr(logging, config.logging.level, logging.WARNING)
    pkg_logger = logging.getLogger("pixcore")
    pkg_logger.setLevel(level)

    for handler in list(pkg_logger.handlers):
        if getattr(handler, "_pixcore_handler", False):
            pkg_logger.removeHandler(handler)

    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(logging.Formatter(LOG_FORMAT))
    ch._pixcore_handler = True
    pkg_logger.addHandler(ch)

    pkg_logger.debug("Logging: level=%s", config.logging.level)
    return pkg_logger
