"""Where: src/lgrep/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated values to the search layers without file I/O.
Trade-offs: - Validation is limited to simple boundary checks.
"""

from __future__ import annotations

import codecs
from collections.abc import Callable
from dataclasses import dataclass

from lgrep.config.config import (
    DEFAULT_CANCEL_KEY,
    DEFAULT_ENCODING,
    DEFAULT_ENCODING_ERRORS,
    DEFAULT_FILE_PATTERN,
    Config,
)
from lgrep.platform.logging import logger


@dataclass(slots=True, frozen=True)
class SearchSettings:
    """Validated knobs consumed by the search service and CLI."""

    default_file_pattern: str = DEFAULT_FILE_PATTERN
    max_workers: int | None = None
    encoding: str = DEFAULT_ENCODING
    encoding_errors: str = DEFAULT_ENCODING_ERRORS
    cancel_key: str = DEFAULT_CANCEL_KEY


def _is_known(name: object, lookup: Callable[[str], object]) -> bool:
    """Return whether ``name`` is a string that ``lookup`` resolves."""

    if not isinstance(name, str):
        return False
    try:
        _ = lookup(name)
    except LookupError:
        return False
    return True


def resolve_settings(config: Config) -> SearchSettings:
    """Build ``SearchSettings`` from ``config``, replacing out-of-range values.

    TOML accepts any value type, so every key is type-checked before use.
    """

    pattern = config.default_file_pattern
    if isinstance(pattern, str) and pattern.strip():
        pattern = pattern.strip()
    else:
        logger.warning(
            "Ignoring invalid default_file_pattern=%r; using %s", pattern, DEFAULT_FILE_PATTERN
        )
        pattern = DEFAULT_FILE_PATTERN

    max_workers = config.max_workers
    if max_workers is not None and (
        not isinstance(max_workers, int) or isinstance(max_workers, bool) or max_workers <= 0
    ):
        logger.warning("Ignoring invalid max_workers=%r; using the pool default", max_workers)
        max_workers = None

    encoding = config.encoding
    if not _is_known(encoding, codecs.lookup):
        logger.warning("Unknown encoding %r; falling back to %s", encoding, DEFAULT_ENCODING)
        encoding = DEFAULT_ENCODING

    encoding_errors = config.encoding_errors
    if not _is_known(encoding_errors, codecs.lookup_error):
        logger.warning(
            "Unknown encoding error handler %r; falling back to %s",
            encoding_errors,
            DEFAULT_ENCODING_ERRORS,
        )
        encoding_errors = DEFAULT_ENCODING_ERRORS

    cancel_key = config.cancel_key
    if not isinstance(cancel_key, str) or len(cancel_key) != 1:
        logger.warning(
            "cancel_key must be a single character, got %r; using '%s'",
            cancel_key,
            DEFAULT_CANCEL_KEY,
        )
        cancel_key = DEFAULT_CANCEL_KEY

    return SearchSettings(
        default_file_pattern=pattern,
        max_workers=max_workers,
        encoding=encoding,
        encoding_errors=encoding_errors,
        cancel_key=cancel_key.lower(),
    )


__all__ = ["SearchSettings", "resolve_settings"]
