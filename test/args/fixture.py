# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 valargs Rui Pinheiro

import pytest

from valargs.args import ArgsParser, ParserConfig


@pytest.fixture
def parser() -> ArgsParser:
    return ArgsParser()


@pytest.fixture
def dash_parser() -> ArgsParser:
    """Parser also accepting single-dash options, e.g. ``-o``."""
    return ArgsParser(ParserConfig(prefixes=("--", "-")))
