from __future__ import annotations

import logging
import sys

from beanwire.settings import BeanwireSettings

LOGGER_NAME = "beanwire"
_HANDLER_ATTR = "_beanwire_handler"


def configure_logging(settings: BeanwireSettings) -> logging.Logger:
    """Attach a single stderr handler to the ``beanwire`` logger.

    Calling this again replaces the level and format of the handler installed
    earlier instead of adding a second one.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.log_level.upper())

    handler = next(
        (existing for existing in logger.handlers if getattr(existing, _HANDLER_ATTR, False)),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        setattr(handler, _HANDLER_ATTR, True)
        logger.addHandler(handler)

    handler.setFormatter(logging.Formatter(settings.log_format))
    return logger


__all__ = ["LOGGER_NAME", "configure_logging"]
