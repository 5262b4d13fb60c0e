# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 valargs Rui Pinheiro

"""Parsed command-line arguments.

An :class:`Args` instance holds the positional arguments and the options found in a token
sequence, and answers queries against them:

>>> args = Args.parse(["fluffy", "--orange", "--favorite-food", "tuna"])
>>> args.nth(0)
'fluffy'
>>> args.has_option("orange")
True
>>> args.option_value("orange") is None
True
>>> args.option_value("favorite-food")
'tuna'
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING

from frozendict import frozendict
from pydantic import BaseModel, ConfigDict, Field

from ..util.helpers.frozendict import FrozenDict


if TYPE_CHECKING:
    import rich.repr

    from .config import ParserConfig


class Args(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    positionals: tuple[str, ...] = Field(default=(), description="Tokens that are neither options nor option values, in input order")
    options: FrozenDict[str, str | None] = Field(default_factory=frozendict, description="Option name to value, None for valueless flags")

    @classmethod
    def parse(cls, tokens: Iterable[str], config: "ParserConfig | None" = None) -> "Args":
        """Parse ``tokens`` (excluding the program name) into an :class:`Args`."""
        from .parser import ArgsParser

        return ArgsParser(config).parse(tokens)

    # MARK: Queries
    def nth(self, index: int) -> str | None:
        """Return the positional argument at ``index``, or None if out of range.

        Negative indices are out of range.
        """
        if 0 <= index < len(self.positionals):
            return self.positionals[index]
        return None

    def has_option(self, name: str) -> bool:
        """Check whether ``name`` was given as an option, with or without a value."""
        return name in self.options

    def option_value(self, name: str) -> str | None:
        """Return the value given to option ``name``.

        Returns None both when the option is missing and when it was a valueless flag, use
        :meth:`has_option` to tell these apart.
        """
        return self.options.get(name)

    # MARK: Printing
    def __rich_repr__(self) -> "rich.repr.Result":
        yield "positionals", self.positionals
        yield "options", self.options
