"""Error types raised or reported by the search feature."""

from __future__ import annotations

from pathlib import Path


class SearchError(Exception):
    """Base class for search failures."""


class EmptySearchTermError(SearchError, ValueError):
    """Raised when a search is requested without a search term."""

    def __init__(self) -> None:
        super().__init__("Search term is required.")


class DirectoryError(SearchError):
    """Raised when the search root is missing or unreadable.

    This is the only failure that aborts a search; it happens before any file
    is scanned.
    """

    def __init__(self, directory: Path, reason: str) -> None:
        super().__init__(f"Invalid directory {directory}: {reason}")
        self.directory: Path = directory
        self.reason: str = reason


class FileReadError(SearchError):
    """A single file could not be opened or read to the end.

    Reported to the diagnostic sink and never propagated out of a search.
    """

    def __init__(self, path: Path, cause: BaseException) -> None:
        message = str(cause) if str(cause) else type(cause).__name__
        super().__init__(f"Error processing {path}: {message}")
        self.path: Path = path
        self.cause: BaseException = cause
        self.error_message: str = message


__all__ = ["DirectoryError", "EmptySearchTermError", "FileReadError", "SearchError"]
