# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 valargs Rui Pinheiro

# Shared pytest fixtures, and collection of the docstring examples throughout the package.
from doctest import ELLIPSIS

import pytest

from sybil import Sybil
from sybil.parsers.rest import DocTestParser

from test.args.fixture import *  # noqa: F403
from valargs.util.logging import LoggingManager


# Automatically provide a logging manager for all tests
@pytest.fixture(autouse=True, scope="session")
def logging_manager() -> LoggingManager:
    manager = LoggingManager()
    if not manager.initialized:
        manager.initialize(
            {
                "levels": {
                    "tty": "NOTSET",
                    "default": "NOTSET",
                },
                "rich": False,
            }
        )
    return manager


pytest_collect_file = Sybil(
    parsers=[
        DocTestParser(optionflags=ELLIPSIS),
    ],
    patterns=["*.py"],
    excludes=["valargs/__main__.py"],
).pytest()
