# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 valargs Rui Pinheiro

import pytest

from pydantic import ValidationError

from valargs.args import ParserConfig


@pytest.mark.args
@pytest.mark.config
class TestParserConfig:
    def test_default(self):
        assert ParserConfig().prefixes == ("--",)

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("--", ("--",)),
            (["-"], ("-",)),
            (("-", "--"), ("--", "-")),
            (["--", "-", "--"], ("--", "-")),
            (["+", "/", "---"], ("---", "+", "/")),
        ],
    )
    def test_normalizes(self, value, expected):
        assert ParserConfig(prefixes=value).prefixes == expected

    @pytest.mark.parametrize(
        "value",
        [
            "",
            [],
            ["--", ""],
            [1],
            3,
        ],
    )
    def test_rejects_invalid(self, value):
        with pytest.raises(ValidationError):
            ParserConfig(prefixes=value)

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            ParserConfig(prefix="--")  # pyright: ignore[reportCallIssue]

    def test_frozen(self):
        config = ParserConfig()
        with pytest.raises(ValidationError):
            config.prefixes = ("-",)  # pyright: ignore[reportAttributeAccessIssue]
