"""Data structures that describe a text search and its outcome."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from lgrep.config.config import DEFAULT_FILE_PATTERN


@dataclass(slots=True, frozen=True)
class SearchRequest:
    """Validated inputs for one search run.

    Attributes:
        search_term: Substring to look for, compared case-insensitively.
        directory: Root directory to enumerate.
        file_pattern: Shell-style glob matched against file names.
        recursive: Whether to descend into subdirectories.
        limit: Maximum number of matches to report; ``None`` means unbounded.
    """

    search_term: str
    directory: Path
    file_pattern: str = DEFAULT_FILE_PATTERN
    recursive: bool = False
    limit: int | None = None

    def __post_init__(self) -> None:
        if self.limit is not None and self.limit < 1:
            raise ValueError(f"limit must be a positive integer; received {self.limit}")


@dataclass(slots=True, frozen=True)
class MatchEvent:
    """A single matching line, emitted as soon as it is counted."""

    file_path: Path
    line: str


class SearchOutcome(StrEnum):
    """Why the aggregate search stopped."""

    COMPLETED = "completed"
    LIMIT_REACHED = "limit_reached"
    CANCELLED = "cancelled"


@dataclass(slots=True, frozen=True)
class SearchSummary:
    """Final report delivered once every worker has settled."""

    total_matches: int
    limit_reached: bool
    cancelled: bool
    total_files: int = 0
    failed_files: int = 0

    @property
    def outcome(self) -> SearchOutcome:
        """Collapse the flags into a single outcome, cancellation first."""

        if self.cancelled:
            return SearchOutcome.CANCELLED
        if self.limit_reached:
            return SearchOutcome.LIMIT_REACHED
        return SearchOutcome.COMPLETED


__all__ = ["MatchEvent", "SearchOutcome", "SearchRequest", "SearchSummary"]
