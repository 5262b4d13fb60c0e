# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 valargs Rui Pinheiro

from pydantic import Field

from ..config.models import BaseConfigModel
from .levels import Level, LoggingLevel


class LoggingLevels(BaseConfigModel):
    tty: Level = Field(default=LoggingLevel.WARNING, description="Log level for TTY output")
    root: Level = Field(default=LoggingLevel.NOTSET, description="Log level for the root log handler")
    default: Level = Field(default=LoggingLevel.NOTSET, description="Default log level applied to loggers obtained through getLogger")


class LoggingConfig(BaseConfigModel):
    levels: LoggingLevels = Field(default_factory=LoggingLevels, description="Logging levels configuration")
    rich: bool = Field(default=True, description="Enable rich text (colors etc) in TTY output")
