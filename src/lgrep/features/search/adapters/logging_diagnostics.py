"""Where: src/lgrep/features/search/adapters/logging_diagnostics.py
What: Diagnostic sink that turns per-file read failures into structured log records.
Why: Let the CLI surface file errors through the shared Rich handler.
"""

from __future__ import annotations

from pathlib import Path
from typing import final

from lgrep.platform.logging import logger

from ..domain import FileReadError
from ..usecases.search_types import SearchEvent


@final
class LoggingDiagnosticSink:
    """Log each ``FileReadError`` as a ``search.file.error`` warning."""

    def __init__(self, base_path: Path | None = None) -> None:
        self._base_path: Path | None = base_path

    def report(self, error: FileReadError) -> None:
        logger.warning(
            "Error processing %s: %s",
            error.path,
            error.error_message,
            extra={
                "search_event": SearchEvent.FILE_ERROR.value,
                "source_path": str(error.path),
                "source_base_path": str(self._base_path) if self._base_path else None,
                "error_message": error.error_message,
            },
        )


__all__ = ["LoggingDiagnosticSink"]
