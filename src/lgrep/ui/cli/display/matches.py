"""Console sink that prints matches as they are counted."""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.text import Text

from lgrep.features.search import MatchEvent


@final
class ConsoleMatchSink:
    """Print each match as ``<path>: <line>`` in green.

    The search coordinator serializes calls, so lines never interleave.
    """

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(soft_wrap=True, highlight=False)

    def emit(self, event: MatchEvent) -> None:
        # Text avoids interpreting markup that happens to appear in file contents
        self.console.print(Text(f"{event.file_path}: {event.line}", style="green"))


__all__ = ["ConsoleMatchSink"]
