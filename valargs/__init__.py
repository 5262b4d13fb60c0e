# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 valargs Rui Pinheiro

"""Minimal command-line argument accessor.

>>> import valargs
>>> args = valargs.parse_tokens(["fluffy", "--orange"])
>>> args.nth(0), args.has_option("orange"), args.option_value("orange")
('fluffy', True, None)
"""

from .args import Args, ArgsParser, ParserConfig
from .process import from_process, parse_tokens


__all__ = [
    "Args",
    "ArgsParser",
    "ParserConfig",
    "from_process",
    "parse_tokens",
]
