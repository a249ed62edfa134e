"""Where: src/lgrep/features/search/usecases/cancellation.py
What: Single-shot cancellation flag shared between a trigger and the scanning workers.
Why: Workers poll it without blocking; the trigger side may live on any thread.
"""

from __future__ import annotations

import threading
from typing import Final


class CancellationSignal:
    """Set-once flag observed cooperatively by search workers.

    Once triggered it stays set. After ``close`` the signal is frozen: further
    triggers are ignored so a late keypress cannot change a finished search.
    """

    def __init__(self) -> None:
        self._event: Final[threading.Event] = threading.Event()
        self._lock: Final[threading.Lock] = threading.Lock()
        self._closed: bool = False

    def trigger(self) -> bool:
        """Request cancellation.

        Returns:
            bool: ``True`` only for the call that actually set the flag.
        """

        with self._lock:
            if self._closed or self._event.is_set():
                return False
            self._event.set()
            return True

    def close(self) -> bool:
        """Freeze the signal and return whether it was triggered."""

        with self._lock:
            self._closed = True
            return self._event.is_set()

    @property
    def triggered(self) -> bool:
        """Whether cancellation was requested. Never blocks."""

        return self._event.is_set()


__all__ = ["CancellationSignal"]
