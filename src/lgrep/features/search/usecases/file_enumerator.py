"""Where: src/lgrep/features/search/usecases/file_enumerator.py
What: Build the sorted candidate file list for one search.
Why: Enumeration is the only step allowed to abort a search, so it runs to
completion before any worker starts.
"""

from __future__ import annotations

import fnmatch
import os
from pathlib import Path

from lgrep.platform.logging import logger

from ..domain import DirectoryError


def enumerate_candidates(directory: Path, file_pattern: str, recursive: bool) -> list[Path]:
    """Return files under ``directory`` whose names match ``file_pattern``.

    Args:
        directory: Root to enumerate. Must be an existing, readable directory.
        file_pattern: Shell-style glob (``*``, ``?``, ``[...]``) applied to file names.
        recursive: Descend into subdirectories when ``True``.

    Returns:
        list[Path]: Matching files sorted lexicographically by path string.
        An empty list is a valid result.

    Raises:
        DirectoryError: If the root does not exist, is not a directory, or
            cannot be listed.
    """
    if not directory.exists():
        raise DirectoryError(directory, "directory does not exist")
    if not directory.is_dir():
        raise DirectoryError(directory, "not a directory")

    try:
        with os.scandir(directory) as entries:
            top_level = list(entries)
    except OSError as exc:
        raise DirectoryError(directory, str(exc) or type(exc).__name__) from exc

    candidates = [
        Path(entry.path)
        for entry in top_level
        if _is_file(entry) and fnmatch.fnmatch(entry.name, file_pattern)
    ]

    if recursive:
        for entry in top_level:
            if not _is_subdirectory(entry):
                continue
            for root, _dirs, files in os.walk(entry.path, onerror=_log_unreadable):
                # os.walk lists every non-directory entry; keep regular files only
                candidates.extend(
                    path
                    for path in (Path(root, name) for name in fnmatch.filter(files, file_pattern))
                    if path.is_file()
                )

    return sorted(candidates, key=str)


def _is_file(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_file()
    except OSError:
        return False


def _is_subdirectory(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


def _log_unreadable(error: OSError) -> None:
    logger.warning("Skipping unreadable directory %s: %s", error.filename, error.strerror or error)


__all__ = ["enumerate_candidates"]
