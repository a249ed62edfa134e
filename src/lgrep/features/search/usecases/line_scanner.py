"""Where: src/lgrep/features/search/usecases/line_scanner.py
What: Lazily yield the lines of one file that contain the search term.
Why: Files are streamed so memory stays flat, and a bad file only ends its own scan.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from functools import lru_cache
from pathlib import Path
from typing import final

from lgrep.config.config import DEFAULT_ENCODING, DEFAULT_ENCODING_ERRORS

from ..domain import FileReadError
from .ports import DiagnosticSink


@lru_cache(maxsize=4096)
def _fold_char(char: str) -> str:
    # Simple one-to-one mapping only: "ß" stays "ß" rather than becoming "SS"
    upper = char.upper()
    return upper if len(upper) == 1 else char


def fold_case(text: str) -> str:
    """Upper-case ``text`` one character at a time, never changing its length.

    Two strings compare equal after folding exactly when they are equal under
    an ordinal, case-insensitive comparison.
    """

    if text.isascii():
        return text.upper()
    return "".join(_fold_char(char) for char in text)


def line_matches(line: str, needle: str) -> bool:
    """Return whether ``line`` contains ``needle`` ignoring case.

    ``needle`` must already be passed through ``fold_case``.
    """

    return needle in fold_case(line)


@final
class LineScanner:
    """Stream matching lines from a file, reporting read failures instead of raising."""

    def __init__(
        self,
        diagnostics: DiagnosticSink,
        *,
        encoding: str = DEFAULT_ENCODING,
        errors: str = DEFAULT_ENCODING_ERRORS,
    ) -> None:
        self._diagnostics: DiagnosticSink = diagnostics
        self._encoding: str = encoding
        self._errors: str = errors

    def scan(
        self,
        file_path: Path,
        search_term: str,
        should_stop: Callable[[], bool] | None = None,
    ) -> Iterator[str]:
        """Yield each line of ``file_path`` containing ``search_term``.

        Lines are yielded without their line terminator and in file order.
        ``should_stop`` is polled before every line is read; once it returns
        ``True`` the scan ends and the file is closed.

        If the file cannot be opened or decoding/reading fails partway, the
        failure is sent to the diagnostic sink as a ``FileReadError`` and the
        iterator simply ends.
        """
        needle = fold_case(search_term)
        try:
            with file_path.open("r", encoding=self._encoding, errors=self._errors) as handle:
                for raw_line in handle:
                    if should_stop is not None and should_stop():
                        return
                    line = raw_line.rstrip("\r\n")
                    if line_matches(line, needle):
                        yield line
        except (OSError, UnicodeError) as exc:
            self._diagnostics.report(FileReadError(file_path, exc))


__all__ = ["LineScanner", "fold_case", "line_matches"]
