"""Where: src/lgrep/features/search/usecases/search_coordinator.py
What: Fan the line scanner out across candidate files on a bounded thread pool.
Why: Own the shared match state, the limit and cancellation for one search.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from contextlib import closing
from pathlib import Path
from typing import Final, final

from lgrep.config.config import DEFAULT_ENCODING, DEFAULT_ENCODING_ERRORS
from lgrep.platform.logging import logger

from ..domain import EmptySearchTermError, FileReadError, MatchEvent, SearchSummary
from .cancellation import CancellationSignal
from .line_scanner import LineScanner
from .ports import DiagnosticSink, MatchSink
from .search_state import SharedSearchState
from .search_types import FileOutcome, SearchEvent, SearchLogContext, new_run_id


class _FailureTracker:
    """Forward per-file errors and remember which files failed during one run."""

    def __init__(self, diagnostics: DiagnosticSink) -> None:
        self._diagnostics: Final[DiagnosticSink] = diagnostics
        self._lock: Final[threading.Lock] = threading.Lock()
        self._failed: set[Path] = set()

    def report(self, error: FileReadError) -> None:
        with self._lock:
            self._failed.add(error.path)
        self._diagnostics.report(error)

    def has_failed(self, path: Path) -> bool:
        with self._lock:
            return path in self._failed


@final
class SearchCoordinator:
    """Run one concurrent search over a fixed candidate list."""

    def __init__(
        self,
        diagnostics: DiagnosticSink,
        *,
        max_workers: int | None = None,
        encoding: str = DEFAULT_ENCODING,
        encoding_errors: str = DEFAULT_ENCODING_ERRORS,
        executor_factory: Callable[[], ThreadPoolExecutor] | None = None,
    ) -> None:
        """Create a coordinator.

        Args:
            diagnostics: Sink for per-file read failures.
            max_workers: Upper bound on concurrently scanned files. ``None``
                lets ``ThreadPoolExecutor`` pick its default.
            encoding: Text encoding used to read every file.
            encoding_errors: Decoding error policy passed to ``open``.
            executor_factory: Override for the worker pool, mainly for tests.
        """
        self._diagnostics: DiagnosticSink = diagnostics
        self._encoding: str = encoding
        self._encoding_errors: str = encoding_errors
        self._executor_factory: Callable[[], ThreadPoolExecutor] = executor_factory or (
            lambda: ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="lgrep-scan")
        )

    def run(
        self,
        candidates: Sequence[Path],
        search_term: str,
        limit: int | None,
        signal: CancellationSignal,
        sink: MatchSink,
        *,
        run_id: str | None = None,
        directory: Path | None = None,
    ) -> SearchSummary:
        """Scan ``candidates`` concurrently and return the aggregate summary.

        Every file task checks the cancellation signal and the limit flag
        before it starts and between lines. Matches go through
        ``SharedSearchState`` which counts and emits them atomically. The call
        returns only after every task is terminal; the signal is then closed
        so later triggers have no effect on this search.

        Args:
            candidates: Sorted candidate file list.
            search_term: Non-empty substring to search for.
            limit: Maximum number of matches to emit, or ``None``.
            signal: Cancellation signal for this search only.
            sink: Receives each counted ``MatchEvent``.
            run_id: Identifier carried in log extras.
            directory: Search root, used for log rendering only.

        Returns:
            SearchSummary: Exact match count plus limit and cancellation flags.

        Raises:
            EmptySearchTermError: If ``search_term`` is empty.
        """
        if not search_term:
            raise EmptySearchTermError()

        state = SharedSearchState(limit, sink)
        failures = _FailureTracker(self._diagnostics)
        scanner = LineScanner(failures, encoding=self._encoding, errors=self._encoding_errors)
        context = SearchLogContext(
            run_id=run_id or new_run_id(),
            directory=directory,
            total_files=len(candidates),
        )

        def should_stop() -> bool:
            return signal.triggered or state.limit_reached

        def scan_file(path: Path) -> FileOutcome:
            if should_stop():
                return FileOutcome.ABANDONED

            logger.debug("Scanning %s [run=%s]", path, context.run_id)
            with closing(scanner.scan(path, search_term, should_stop)) as lines:
                for line in lines:
                    _ = state.record_match(MatchEvent(file_path=path, line=line))
                    if should_stop():
                        return FileOutcome.ABANDONED

            if failures.has_failed(path):
                return FileOutcome.FAILED
            if should_stop():
                return FileOutcome.ABANDONED
            return FileOutcome.COMPLETED

        if candidates:
            with self._executor_factory() as executor:
                futures = [executor.submit(scan_file, path) for path in candidates]
            # Leaving the executor block waits for every task to finish.
            for future in futures:
                context.record(future.result())

        cancelled = signal.close()
        summary = SearchSummary(
            total_matches=state.match_count,
            limit_reached=state.limit_reached,
            cancelled=cancelled,
            total_files=len(candidates),
            failed_files=context.failed,
        )
        self._log_outcome(summary, context, limit)
        return summary

    @staticmethod
    def _log_outcome(summary: SearchSummary, context: SearchLogContext, limit: int | None) -> None:
        extra = context.summary_extra()
        extra["total_matches"] = summary.total_matches

        if summary.cancelled:
            logger.info(
                "Search cancelled after %d matches",
                summary.total_matches,
                extra={"search_event": SearchEvent.CANCELLED.value, **extra},
            )
        if summary.limit_reached:
            logger.info(
                "Match limit of %s reached",
                limit,
                extra={"search_event": SearchEvent.LIMIT_REACHED.value, "limit": limit, **extra},
            )

        logger.debug(
            "Search complete [run=%s, matches=%d, scanned=%d, abandoned=%d, failed=%d, duration=%.2fs]",
            context.run_id,
            summary.total_matches,
            context.scanned,
            context.abandoned,
            context.failed,
            extra["duration_seconds"],
            extra={"search_event": SearchEvent.COMPLETE.value, **extra},
        )


__all__ = ["SearchCoordinator"]
