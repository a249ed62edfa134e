"""src/lgrep/ui/cli/display/result.py
What: Render user-facing messages around a search run.
Why: Keep console output formatting consistent across the interface.
"""

from __future__ import annotations

from typing import final

from rich.console import Console

from lgrep.features.search import SearchSummary

from .summary import render_search_summary


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize result display."""
        self.console = console or Console()

    def show_cancel_hint(self, cancel_key: str, quiet: bool = False) -> None:
        """Tell the user which key cancels the running search."""

        if quiet:
            return
        self.console.print(f"\nPress '{cancel_key}' to cancel the search anytime...", markup=False)

    def show_summary(self, summary: SearchSummary, quiet: bool = False) -> None:
        """Display the final match count.

        Args:
            summary: Summary returned by the search service.
            quiet: Whether to suppress the report.
        """
        if quiet:
            return

        render_search_summary(self.console, summary)
