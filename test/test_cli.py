# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 valargs Rui Pinheiro

import pytest

from valargs import Args
from valargs.cli import main, render


@pytest.mark.cli
class TestCli:
    def test_main_prints_arguments(self, capsys):
        assert main(["valargs", "fluffy", "--orange", "--favorite-food", "tuna"]) == 0
        out = capsys.readouterr().out
        assert "fluffy" in out
        assert "orange" in out
        assert "favorite-food" in out
        assert "tuna" in out

    def test_main_without_arguments(self, capsys):
        assert main(["valargs"]) == 0
        assert "No arguments given." in capsys.readouterr().out

    def test_render_rows(self):
        table = render(Args.parse(["a", "b", "--flag", "--key", "value"]))
        assert table.row_count == 4
        kinds = list(table.columns[0].cells)
        assert kinds == ["positional", "positional", "flag", "option"]

    @pytest.mark.parametrize(
        "argv",
        [
            ["valargs", "[bold]x[/bold]", "--p", "[/x]"],
            ["valargs", "--[red]name", "[link=file:///etc]v[/link]"],
        ],
    )
    def test_main_prints_tokens_verbatim(self, capsys, argv):
        assert main(argv) == 0
        out = capsys.readouterr().out
        for token in argv[1:]:
            assert token.removeprefix("--") in out

    def test_render_keeps_markup_literal(self):
        table = render(Args.parse(["[bold]x[/bold]", "--p", "[/x]", "--[dim]f"]))
        names = [cell.plain for cell in table.columns[1].cells if hasattr(cell, "plain")]
        values = [cell.plain for cell in table.columns[2].cells]
        assert values == ["[bold]x[/bold]", "[/x]", "(none)"]
        assert names == ["p", "[dim]f"]
