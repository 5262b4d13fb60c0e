# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 valargs Rui Pinheiro

import enum
import logging

from typing import Annotated, Any

from typing_extensions import override

from pydantic import PlainSerializer, PlainValidator


class LoggingLevel(enum.IntEnum):
    OFF      = -1
    NOTSET   = logging.NOTSET
    DEBUG    = logging.DEBUG
    INFO     = logging.INFO
    WARNING  = logging.WARNING
    ERROR    = logging.ERROR
    CRITICAL = logging.CRITICAL  # fmt: skip

    @classmethod
    def coerce(cls, value: Any) -> int:
        """Convert a level name, number or boolean into a numeric logging level.

        Names are case-insensitive, ``"FALSE"`` and ``False`` disable output and ``True`` means ``INFO``.
        Numbers without a matching name are accepted as-is as long as they are not below ``OFF``.

        >>> LoggingLevel.coerce("warning")
        30
        >>> LoggingLevel.coerce("15")
        15
        >>> LoggingLevel.coerce(False)
        -1
        """
        if isinstance(value, LoggingLevel):
            return value.value

        if isinstance(value, str):
            upper = value.strip().upper()
            if upper in cls.__members__:
                level = cls.__members__[upper].value
            elif upper == "FALSE":
                level = cls.OFF.value
            else:
                try:
                    level = int(upper)
                except ValueError as err:
                    msg = f"Unknown logging level string: {value}"
                    raise ValueError(msg) from err

        elif isinstance(value, bool):
            level = cls.INFO.value if value else cls.OFF.value

        elif isinstance(value, int):
            level = value

        else:
            msg = f"Invalid type for logging level: {type(value)}"
            raise TypeError(msg)

        if level < cls.OFF.value:
            msg = f"Invalid value for logging level: {level}"
            raise ValueError(msg)

        return level

    @classmethod
    def validate(cls, value: Any) -> "LoggingLevel | int":
        level = cls.coerce(value)
        try:
            return cls(level)
        except ValueError:
            # Custom numeric level with no name
            return level

    @property
    def enabled(self) -> bool:
        return self.value >= 0

    @override
    def __str__(self) -> str:
        return self.name


Level = Annotated[
    LoggingLevel | int,
    PlainValidator(LoggingLevel.validate),
    PlainSerializer(lambda level: level.name if isinstance(level, LoggingLevel) else str(level)),
]
