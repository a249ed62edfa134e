"""Display management for CLI interface."""

from lgrep.ui.cli.display.matches import ConsoleMatchSink
from lgrep.ui.cli.display.result import ResultDisplay

__all__ = ["ConsoleMatchSink", "ResultDisplay"]
