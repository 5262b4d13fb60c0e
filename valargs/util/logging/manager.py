# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 valargs Rui Pinheiro

"""Logging configuration for valargs.

Configures the root logger and the TTY handler from a :class:`LoggingConfig`.
"""

import logging
import sys

from typing import Any, ClassVar, Self

from ..helpers import script_info
from .config import LoggingConfig


######
# MARK: Logging Manager
class LoggingManager:
    _instance: ClassVar["LoggingManager | None"] = None

    initialized: bool
    config: LoggingConfig
    ch: logging.Handler | None

    def __new__(cls, *args, **kwargs) -> Self:
        if (instance := cls._instance) is None:
            instance = cls._instance = super().__new__(cls, *args, **kwargs)
            instance.initialized = False
            instance.ch = None
        return instance

    def initialize(self, config: LoggingConfig | dict[str, Any] | None = None) -> None:
        if config is None:
            config = LoggingConfig()
        elif not isinstance(config, LoggingConfig):
            config = LoggingConfig.model_validate(config)

        if self.initialized:
            msg = f"Must not initialise {type(self).__name__} twice"
            raise RuntimeError(msg)
        self.initialized = True

        self.config = config

        self._configure_root_logger()
        self._configure_tty_handler()
        self._configure_exception_handler()
        self._configure_logger_levels()

    def _configure_root_logger(self) -> None:
        logging.captureWarnings(capture=True)

        root = self.config.levels.root
        if root >= 0:
            logging.root.setLevel(int(root))

    def _configure_tty_handler(self) -> None:
        self.ch = None
        if self.config.levels.tty < 0:
            return

        if self.config.rich:
            from .rich_handler import CustomRichHandler

            self.ch = CustomRichHandler()
        else:
            self.ch = logging.StreamHandler(sys.stderr)
            self.ch.setFormatter(logging.Formatter("[%(levelname).1s:%(name)s] %(message)s"))

        self.ch.setLevel(int(self.config.levels.tty))

        # pytest captures records through its own handlers
        if not script_info.is_unit_test():
            logging.root.addHandler(self.ch)

    def _configure_exception_handler(self) -> None:
        if self.config.rich:
            from rich.traceback import install

            install(extra_lines=1, word_wrap=False)
        else:
            from . import exception_handler

            exception_handler.install()

    def apply_logging_level(self, logger: logging.Logger) -> None:
        # Do nothing if logger already has an explicit level set
        if logger.level != logging.NOTSET:
            return

        level = self.config.levels.default
        if level <= logging.NOTSET:
            return

        logger.setLevel(int(level))

    def _configure_logger_levels(self) -> None:
        for logger in logging.root.manager.loggerDict.values():
            if isinstance(logger, logging.Logger):
                self.apply_logging_level(logger)
