# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 valargs Rui Pinheiro

from collections.abc import Iterable
from typing import Any

from pydantic import Field, field_validator

from ..util.config import BaseConfigModel


DEFAULT_PREFIXES: tuple[str, ...] = ("--",)


class ParserConfig(BaseConfigModel):
    """Option marker configuration.

    >>> ParserConfig().prefixes
    ('--',)
    >>> ParserConfig(prefixes=["-", "--", "-"]).prefixes
    ('--', '-')
    """

    prefixes: tuple[str, ...] = Field(
        default=DEFAULT_PREFIXES,
        description="Prefixes introducing an option name, e.g. '--'. Longer prefixes are matched first.",
    )

    @field_validator("prefixes", mode="before")
    @classmethod
    def normalize_prefixes(cls, value: Any) -> tuple[str, ...]:
        if isinstance(value, str):
            value = (value,)
        if not isinstance(value, Iterable):
            msg = f"Option prefixes must be a string or a sequence of strings, got {type(value)}"
            raise ValueError(msg)

        prefixes: list[str] = []
        for prefix in value:
            if not isinstance(prefix, str):
                msg = f"Option prefixes must be strings, got {type(prefix)}"
                raise ValueError(msg)
            if not prefix:
                msg = "Option prefixes must not be empty"
                raise ValueError(msg)
            if prefix not in prefixes:
                prefixes.append(prefix)

        if not prefixes:
            msg = "At least one option prefix is required"
            raise ValueError(msg)

        return tuple(sorted(prefixes, key=len, reverse=True))
