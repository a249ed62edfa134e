"""Where: src/lgrep/features/search/usecases/search_state.py
What: Lock-guarded bounded match counter shared by the scanning workers.
Why: The limit check, the increment and the emit must be one atomic step.
"""

from __future__ import annotations

import threading
from typing import Final

from ..domain import MatchEvent
from .ports import MatchSink


class SharedSearchState:
    """Match count and limit flag for a single search run.

    Invariant: ``match_count <= limit`` at every observation. A match that
    would exceed the limit flips ``limit_reached`` and is discarded.
    """

    def __init__(self, limit: int | None, sink: MatchSink) -> None:
        self._limit: Final[int | None] = limit
        self._sink: Final[MatchSink] = sink
        self._lock: Final[threading.Lock] = threading.Lock()
        self._match_count: int = 0
        self._limit_reached: bool = False

    def record_match(self, event: MatchEvent) -> bool:
        """Count and emit ``event`` unless the limit has been hit.

        The sink is called while holding the lock, so every emitted match is
        exactly one counted match and sink writes never interleave.

        Returns:
            bool: ``True`` if the match was counted and emitted.
        """

        with self._lock:
            if self._limit_reached:
                return False
            if self._limit is not None and self._match_count >= self._limit:
                self._limit_reached = True
                return False
            self._sink.emit(event)
            self._match_count += 1
            return True

    @property
    def match_count(self) -> int:
        with self._lock:
            return self._match_count

    @property
    def limit_reached(self) -> bool:
        """Lock-free read; the flag only ever goes from False to True."""

        return self._limit_reached


__all__ = ["SharedSearchState"]
