# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 valargs Rui Pinheiro

import logging

from typing_extensions import override

from rich.console import Console, ConsoleRenderable
from rich.logging import RichHandler
from rich.text import Text


class CustomRichHandler(RichHandler):
    """Rich handler printing ``[L:name] message`` to stderr, without the time column."""

    @override
    def __init__(
        self,
        *args,
        rich_tracebacks: bool = True,
        show_name: bool = True,
        level_prefix: str = "[",
        level_suffix: str = "] ",
        **kwargs,
    ) -> None:
        console = Console(stderr=True)

        super().__init__(
            *args,
            console=console,
            rich_tracebacks=rich_tracebacks,
            show_time=False,
            show_level=False,
            enable_link_path=False,
            **kwargs,
        )

        self.show_name = show_name
        self.level_prefix = level_prefix
        self.level_suffix = level_suffix

    def get_level_style(self, record: logging.LogRecord) -> str:
        return f"logging.level.{record.levelname.lower()}"

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        text = Text()

        text.append(self.level_prefix, style="dim")
        text.append(record.levelname[0], style=self.get_level_style(record))
        if self.show_name:
            text.append(f":{record.name}", style="dim")
        text.append(self.level_suffix, style="dim")

        text.append(message, style=self.get_level_style(record))

        return text
