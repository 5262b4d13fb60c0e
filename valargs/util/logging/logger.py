# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 valargs Rui Pinheiro

import logging

from typing import Any


# Helper for class constructors to obtain a logger object
def getLogger(obj: object, parent: Any = None, name: str | None = None) -> logging.Logger:  # noqa: N802 matches logging.getLogger
    """Return the logger for ``obj``.

    Strings are used as the logger name, any other object is named after its class.
    When ``parent`` is a logger (or exposes one as ``.log``) the result is its child.

    >>> getLogger("ArgsParser").name
    'ArgsParser'
    >>> getLogger(object(), parent=getLogger("valargs")).name
    'valargs.object'
    """
    if name is None:
        name = obj if isinstance(obj, str) else type(obj).__name__

    if isinstance(parent, logging.Logger):
        logger = parent.getChild(name)
    elif parent is not None and isinstance(getattr(parent, "log", None), logging.Logger):
        logger = parent.log.getChild(name)
    else:
        logger = logging.getLogger(name)

    # Try to apply the logging level from the manager
    from .manager import LoggingManager

    manager = LoggingManager()
    if manager.initialized:
        manager.apply_logging_level(logger)

    return logger


class LoggableMixin:
    """Mixin that adds a lazily created ``.log`` property named after the class."""

    @property
    def log(self) -> logging.Logger:
        log: logging.Logger | None = self.__dict__.get("_log")
        if log is None:
            log = self.__dict__["_log"] = getLogger(self)
        return log
