# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 valargs Rui Pinheiro

"""Command-line entry point that prints how its own arguments were parsed."""

import sys

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .args import Args
from .process import from_process
from .util.helpers import script_info
from .util.logging import LoggingManager, getLogger


def render(args: Args) -> Table:
    # Tokens are user input, never console markup
    table = Table(title="Arguments", show_lines=False)
    table.add_column("Kind", style="cyan")
    table.add_column("Name", style="magenta")
    table.add_column("Value")

    for index, value in enumerate(args.positionals):
        table.add_row("positional", str(index), Text(value))

    for name, value in args.options.items():
        if value is None:
            table.add_row("flag", Text(name), Text("(none)", style="dim"))
        else:
            table.add_row("option", Text(name), Text(value))

    return table


def main(argv: Sequence[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv

    manager = LoggingManager()
    if not manager.initialized:
        manager.initialize()

    log = getLogger(script_info.get_script_name(argv))

    args = from_process(argv)
    log.debug("Arguments: %r", args)

    console = Console()
    if not args.positionals and not args.options:
        console.print("No arguments given.")
    else:
        console.print(render(args))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
