# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 valargs Rui Pinheiro

"""Entry points sourcing the token sequence from the running process."""

import sys

from collections.abc import Iterable, Sequence

from .args import Args, ParserConfig


def parse_tokens(tokens: Iterable[str], *, config: ParserConfig | None = None) -> Args:
    """Parse an explicit token sequence, which must not include the program name.

    >>> parse_tokens(["--favorite-food", "tuna"]).option_value("favorite-food")
    'tuna'
    """
    return Args.parse(tokens, config)


def from_process(argv: Sequence[str] | None = None, *, config: ParserConfig | None = None) -> Args:
    """Parse the arguments the program was started with.

    ``argv`` defaults to :data:`sys.argv`. Its first element is the program path and is dropped.

    >>> from_process(["/usr/bin/cat", "fluffy", "--orange"]).nth(0)
    'fluffy'
    """
    if argv is None:
        argv = sys.argv
    return parse_tokens(argv[1:], config=config)
