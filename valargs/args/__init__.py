# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 valargs Rui Pinheiro

from .args import Args
from .config import ParserConfig
from .parser import ArgsParser


__all__ = [
    "Args",
    "ArgsParser",
    "ParserConfig",
]
