#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Logging mixin shared by CloudOps components.

Components inherit ``ModernLogger`` and log through ``self.info(...)`` and
friends, so every class gets a named child of the ``cloudops`` logger without
repeating ``logging.getLogger`` boilerplate.
"""

import logging
import sys
import threading
from typing import Any, Optional, Union

ROOT_LOGGER_NAME = "cloudops"
DEFAULT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

_CONFIGURE_LOCK = threading.Lock()
_HANDLER_ATTR = "_cloudops_handler"


def resolve_level(level: Union[str, int, None]) -> int:
    """
    Translate a level name (``"info"``) or number into a ``logging`` level.
    """
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    normalized = str(level).strip().lower()
    if normalized not in _LEVELS:
        raise ValueError(
            f"Unknown log level '{level}'. Expected one of: {', '.join(sorted(_LEVELS))}"
        )
    return _LEVELS[normalized]


def configure_logging(
    level: Union[str, int] = "info",
    stream: Any = None,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """
    Install a single stream handler on the ``cloudops`` root logger.

    Calling this more than once replaces the level and stream instead of
    stacking handlers.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    with _CONFIGURE_LOCK:
        for handler in list(root.handlers):
            if getattr(handler, _HANDLER_ATTR, False):
                root.removeHandler(handler)

        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(logging.Formatter(fmt))
        setattr(handler, _HANDLER_ATTR, True)
        root.addHandler(handler)
        root.setLevel(resolve_level(level))
        root.propagate = False
    return root


class ModernLogger:
    """
    Mixin exposing ``debug/info/warning/error/exception`` on the instance.
    """

    def __init__(self, name: Optional[str] = None, level: Union[str, int, None] = None):
        logger_name = name or type(self).__name__
        if not logger_name.startswith(ROOT_LOGGER_NAME):
            logger_name = f"{ROOT_LOGGER_NAME}.{logger_name}"
        self._logger = logging.getLogger(logger_name)
        if level is not None:
            self._logger.setLevel(resolve_level(level))

    @property
    def logger(self) -> logging.Logger:
        # Subclasses that skip ModernLogger.__init__ still get a usable logger.
        existing = self.__dict__.get("_logger")
        if existing is None:
            existing = logging.getLogger(f"{ROOT_LOGGER_NAME}.{type(self).__name__}")
            self._logger = existing
        return existing

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.logger.error(message, *args, **kwargs)

    def exception(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.logger.exception(message, *args, **kwargs)
