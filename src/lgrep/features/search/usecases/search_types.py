"""src/lgrep/features/search/usecases/search_types.py
Where: Search feature usecases layer.
What: Structured log event identifiers and per-run bookkeeping.
Why: Keep the coordinator lean by centralising type definitions.
"""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any


class SearchEvent(StrEnum):
    """Structured event identifiers for search logs."""

    START = "search.start"
    COMPLETE = "search.complete"
    LIMIT_REACHED = "search.limit_reached"
    CANCELLED = "search.cancelled"
    CANCEL_REQUESTED = "search.cancel.requested"
    NO_FILES = "search.no_files"
    DIRECTORY_ERROR = "search.directory.error"
    FILE_ERROR = "search.file.error"


class FileOutcome(StrEnum):
    """Terminal state of one file's scanning task."""

    COMPLETED = "completed"
    ABANDONED = "abandoned"
    FAILED = "failed"


def new_run_id() -> str:
    """Return a short identifier that ties together the log records of one search."""

    return uuid.uuid4().hex[:12]


@dataclass(slots=True)
class SearchLogContext:
    """Bookkeeping for one coordinator run, filled in after the pool settles."""

    run_id: str
    directory: Path | None
    total_files: int
    start_time: float = field(default_factory=time.perf_counter)
    scanned: int = 0
    abandoned: int = 0
    failed: int = 0

    def record(self, outcome: FileOutcome) -> None:
        """Tally the terminal state of one file task."""

        if outcome is FileOutcome.COMPLETED:
            self.scanned += 1
        elif outcome is FileOutcome.ABANDONED:
            self.abandoned += 1
        else:
            self.failed += 1

    def duration_seconds(self) -> float:
        """Return the elapsed search time in seconds."""

        return time.perf_counter() - self.start_time

    def summary_extra(self) -> dict[str, Any]:
        """Return a dictionary suitable for structured logging extras."""

        return {
            "run_id": self.run_id,
            "directory": str(self.directory) if self.directory is not None else None,
            "total_files": self.total_files,
            "scanned": self.scanned,
            "abandoned": self.abandoned,
            "failed": self.failed,
            "duration_seconds": round(self.duration_seconds(), 4),
        }


__all__ = ["FileOutcome", "SearchEvent", "SearchLogContext", "new_run_id"]
