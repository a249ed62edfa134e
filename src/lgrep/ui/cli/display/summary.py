"""Utilities for rendering the end-of-search report."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from lgrep.features.search import SearchSummary


def render_search_summary(console: Console, summary: SearchSummary) -> None:
    """Render ``"<n> matches found."`` with limit and cancellation notes.

    Args:
        console: Rich console instance used to render output.
        summary: Summary produced by the search service.
    """
    color = "yellow" if summary.total_matches > 0 else "red"
    text = Text(f"\n{summary.total_matches} matches found.", style=color)

    notes: list[str] = []
    if summary.limit_reached:
        notes.append("(Limit reached)")
    if summary.cancelled:
        notes.append("(Search cancelled)")
    if notes:
        _ = text.append(" " + " ".join(notes), style=color)

    console.print(text)

    if summary.failed_files:
        console.print(
            Text(f"{summary.failed_files} file(s) could not be read.", style="red")
        )
