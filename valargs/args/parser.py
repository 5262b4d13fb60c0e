# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 valargs Rui Pinheiro

"""Token scanner producing :class:`~valargs.args.args.Args`."""

from collections.abc import Iterable

from frozendict import frozendict

from ..util.logging import LoggableMixin
from .args import Args
from .config import ParserConfig


class ArgsParser(LoggableMixin):
    """Classify tokens into positionals, option names and option values.

    A token is an option marker when it starts with one of the configured prefixes and has a
    non-empty name after it. A marker followed by a non-marker token takes that token as its
    value, otherwise it is a flag. Later occurrences of an option replace earlier ones.

    >>> ArgsParser().parse(["--a", "--b", "x"]).options
    frozendict({'a': None, 'b': 'x'})
    >>> ArgsParser(ParserConfig(prefixes=("--", "-"))).parse(["--", "-o", "x"]).positionals
    ('--',)
    """

    def __init__(self, config: ParserConfig | None = None) -> None:
        self.config = config if config is not None else ParserConfig()

    def option_name(self, token: str) -> str | None:
        """Return the option name carried by ``token``, or None if it is not an option marker.

        Only the longest matching prefix is stripped, the rest of the token is the name.
        """
        for prefix in self.config.prefixes:
            if token.startswith(prefix):
                return token[len(prefix):] or None
        return None

    def is_option(self, token: str) -> bool:
        return self.option_name(token) is not None

    def parse(self, tokens: Iterable[str]) -> Args:
        tokens = list(tokens)
        positionals: list[str] = []
        options: dict[str, str | None] = {}

        i = 0
        while i < len(tokens):
            token = tokens[i]
            name = self.option_name(token)

            if name is None:
                positionals.append(token)
                i += 1
                continue

            value = None
            if i + 1 < len(tokens) and not self.is_option(tokens[i + 1]):
                value = tokens[i + 1]
                i += 1

            options[name] = value
            i += 1

        self.log.debug("Parsed %d token(s) into %d positional(s) and %d option(s)", len(tokens), len(positionals), len(options))

        return Args(positionals=tuple(positionals), options=frozendict(options))
