"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import final

from lgrep.config.settings import SearchSettings
from lgrep.features.search import SearchRequest


@final
@dataclass(slots=True)
class SearchArgs:
    """Parsed command line arguments.

    ``search_term`` is ``None`` when nothing was given on the command line,
    in which case the first search is prompted for interactively.
    """

    search_term: str | None
    file_pattern: str | None
    recursive: bool
    limit: int | None
    directory: Path
    once: bool
    quiet: bool
    settings: SearchSettings

    def to_request(self) -> SearchRequest | None:
        """Build the request for the first search, or ``None`` to prompt instead."""

        if self.search_term is None:
            return None
        return SearchRequest(
            search_term=self.search_term,
            directory=self.directory,
            file_pattern=self.file_pattern or self.settings.default_file_pattern,
            recursive=self.recursive,
            limit=self.limit,
        )


__all__ = ["SearchArgs"]
