"""src/lgrep/ui/cli/prompts.py
What: Ask the user for search parameters and whether to search again.
Why: Interactive mode builds the same ``SearchRequest`` the flags do.
"""

from __future__ import annotations

from pathlib import Path
from typing import final

from rich.console import Console
from rich.prompt import Confirm, Prompt

from lgrep.config.settings import SearchSettings
from lgrep.features.search import SearchRequest
from lgrep.platform.logging import logger


@final
class SearchPrompter:
    """Collect search parameters through Rich prompts."""

    console: Console

    def __init__(self, settings: SearchSettings, console: Console | None = None) -> None:
        self.console = console or Console()
        self._settings: SearchSettings = settings

    def ask_request(self) -> SearchRequest:
        """Prompt for every parameter of one search.

        Blank answers fall back to defaults: the configured file pattern, no
        recursion, no limit and the current directory. An empty search term is
        passed through so the caller can reject it.
        """
        search_term = Prompt.ask("Enter search term", console=self.console, default="", show_default=False)

        file_pattern = Prompt.ask(
            "Enter file pattern",
            console=self.console,
            default=self._settings.default_file_pattern,
        ).strip() or self._settings.default_file_pattern

        recursive = Confirm.ask(
            "Do you want to search recursively?",
            console=self.console,
            default=False,
        )

        limit = self._parse_limit(
            Prompt.ask(
                "Enter the result limit (blank for no limit)",
                console=self.console,
                default="",
                show_default=False,
            )
        )

        directory = self._parse_directory(
            Prompt.ask(
                "Enter the directory path to search (blank for current directory)",
                console=self.console,
                default="",
                show_default=False,
            )
        )

        return SearchRequest(
            search_term=search_term,
            directory=directory,
            file_pattern=file_pattern,
            recursive=recursive,
            limit=limit,
        )

    def ask_again(self) -> bool:
        """Ask whether to run another search."""

        return Confirm.ask("\nDo you want to search again?", console=self.console, default=False)

    @staticmethod
    def _parse_limit(raw: str) -> int | None:
        value = raw.strip()
        if not value:
            return None
        try:
            limit = int(value)
        except ValueError:
            logger.warning("Ignoring non-numeric limit '%s'; searching without a limit", value)
            return None
        if limit <= 0:
            logger.warning("Ignoring non-positive limit %d; searching without a limit", limit)
            return None
        return limit

    @staticmethod
    def _parse_directory(raw: str) -> Path:
        value = raw.strip()
        if not value:
            return Path.cwd()
        candidate = Path(value).expanduser()
        if not candidate.is_dir():
            logger.warning("Invalid directory: %s. Using current directory.", candidate)
            return Path.cwd()
        return candidate


__all__ = ["SearchPrompter"]
