# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 valargs Rui Pinheiro

import os
import pathlib
import sys


_IS_UNIT_TEST = None

DEFAULT_SCRIPT_NAME = "valargs"


def is_unit_test() -> bool:
    """Test whether running in a unit test environment.

    Returns:
        bool: True if running under pytest or with ``UNIT_TEST`` set, False otherwise.

    """
    global _IS_UNIT_TEST  # noqa: PLW0603

    if _IS_UNIT_TEST is None:
        _IS_UNIT_TEST = _is_unit_test()
    return _IS_UNIT_TEST


def _is_unit_test() -> bool:
    if os.environ.get("PYTEST_VERSION", None) is not None:
        return True

    env = os.environ.get("UNIT_TEST", None)
    if env is not None:
        env = env.strip()
    if not env:
        return False

    return env.lower() not in ("false", "0", "no")


def get_script_name(argv: list[str] | None = None) -> str:
    """Return the name the program was invoked as, without directories.

    >>> get_script_name(["/usr/local/bin/valargs", "--orange"])
    'valargs'
    >>> get_script_name([])
    'valargs'
    """
    if argv is None:
        argv = sys.argv
    if len(argv) > 0 and argv[0]:
        return pathlib.Path(argv[0]).name
    return DEFAULT_SCRIPT_NAME
