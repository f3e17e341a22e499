#!/usr/bin/env python3
import logging

PACKAGE_LOGGER = "edetect"
LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


def _root_unconfigured(record) -> bool:
    # Once the application configures the root logger, records reach it by propagation
    return not logging.getLogger().handlers


def _package_logger() -> logging.Logger:
    logger = logging.getLogger(PACKAGE_LOGGER)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.addFilter(_root_unconfigured)
        logger.addHandler(handler)
    return logger


def get_logger(name: str, level=None) -> logging.Logger:
    """
    Return the logger for an edetect module.

    Args:
        name (str): Logger name, usually the module's ``__name__``
        level: Optional level (name or number); left untouched when None

    Module loggers carry no handlers of their own. They propagate to the
    ``edetect`` package logger, which holds the single stream handler; that
    handler stays silent while the root logger has handlers.
    """
    _package_logger()
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger


def configure_logging(level, name: str = PACKAGE_LOGGER):
    """Set the level of the package logger; module loggers inherit it."""
    _package_logger()
    logging.getLogger(name).setLevel(level)
