# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 valargs Rui Pinheiro

from .config import LoggingConfig, LoggingLevels
from .levels import LoggingLevel
from .logger import LoggableMixin, getLogger
from .manager import LoggingManager


__all__ = [
    "LoggableMixin",
    "LoggingConfig",
    "LoggingLevel",
    "LoggingLevels",
    "LoggingManager",
    "getLogger",
]
