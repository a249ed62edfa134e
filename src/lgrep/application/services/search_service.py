"""Application service for running text searches.

This layer centralizes construction of the search engine so that the CLI (or
any other front end) only deals in ``SearchRequest`` and ``SearchSummary``.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import final

from lgrep.config.settings import SearchSettings
from lgrep.features.search import (
    CancellationSignal,
    DiagnosticSink,
    DirectoryError,
    EmptySearchTermError,
    LoggingDiagnosticSink,
    MatchSink,
    SearchCoordinator,
    SearchEvent,
    SearchRequest,
    SearchSummary,
    enumerate_candidates,
)
from lgrep.features.search.usecases import new_run_id
from lgrep.platform.logging import logger


@final
class TextSearchService:
    """Application service that validates a request and drives one search.

    Only ``EmptySearchTermError`` and ``DirectoryError`` escape ``search``;
    per-file failures go to the diagnostic sink and limit or cancellation are
    reported in the returned summary.
    """

    def __init__(
        self,
        settings: SearchSettings | None = None,
        *,
        enumerator: Callable[[Path, str, bool], list[Path]] | None = None,
        diagnostics_factory: Callable[[Path], DiagnosticSink] | None = None,
        coordinator_factory: Callable[..., SearchCoordinator] | None = None,
    ) -> None:
        """Create a service with overridable collaborators.

        Tests can inject light-weight doubles while production code relies on
        the default enumerator, logging diagnostics and coordinator.
        """

        self._settings: SearchSettings = settings or SearchSettings()
        self._enumerator: Callable[[Path, str, bool], list[Path]] = (
            enumerator or enumerate_candidates
        )
        self._diagnostics_factory: Callable[[Path], DiagnosticSink] = (
            diagnostics_factory or LoggingDiagnosticSink
        )
        self._coordinator_factory: Callable[..., SearchCoordinator] = (
            coordinator_factory or SearchCoordinator
        )

    def search(
        self,
        request: SearchRequest,
        sink: MatchSink,
        signal: CancellationSignal | None = None,
    ) -> SearchSummary:
        """Run ``request`` and stream matches to ``sink``.

        Args:
            request: Search parameters.
            sink: Receives each counted match.
            signal: Cancellation signal for this search; a fresh one is used
                when omitted.

        Returns:
            SearchSummary: Outcome of the search.

        Raises:
            EmptySearchTermError: If the request has no search term.
            DirectoryError: If the directory is missing or unreadable.
        """
        if not request.search_term:
            raise EmptySearchTermError()

        run_id = new_run_id()
        try:
            candidates = self._enumerator(
                request.directory, request.file_pattern, request.recursive
            )
        except DirectoryError as exc:
            logger.error(
                "Search aborted: %s",
                exc,
                extra={
                    "search_event": SearchEvent.DIRECTORY_ERROR.value,
                    "run_id": run_id,
                    "directory": str(request.directory),
                    "error_message": exc.reason,
                },
            )
            raise

        if not candidates:
            logger.info(
                "No files matching '%s'",
                request.file_pattern,
                extra={
                    "search_event": SearchEvent.NO_FILES.value,
                    "run_id": run_id,
                    "directory": str(request.directory),
                    "file_pattern": request.file_pattern,
                },
            )
        else:
            logger.info(
                "Search started [id=%s, files=%d, path=%s]",
                run_id,
                len(candidates),
                request.directory,
                extra={
                    "search_event": SearchEvent.START.value,
                    "run_id": run_id,
                    "search_term": request.search_term,
                    "directory": str(request.directory),
                    "file_pattern": request.file_pattern,
                    "recursive": request.recursive,
                    "limit": request.limit,
                    "total_files": len(candidates),
                },
            )

        coordinator = self._coordinator_factory(
            self._diagnostics_factory(request.directory),
            max_workers=self._settings.max_workers,
            encoding=self._settings.encoding,
            encoding_errors=self._settings.encoding_errors,
        )
        return coordinator.run(
            candidates,
            request.search_term,
            request.limit,
            signal or CancellationSignal(),
            sink,
            run_id=run_id,
            directory=request.directory,
        )


__all__ = ["TextSearchService"]
