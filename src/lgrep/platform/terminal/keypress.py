"""Where: src/lgrep/platform/terminal/keypress.py
What: Background listener that reports single keypresses while a search runs.
Why: Cancellation is triggered from the keyboard without blocking the search
or leaving the terminal in cbreak mode afterwards.
"""

from __future__ import annotations

import os
import sys
import threading
import time
from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager, contextmanager
from typing import Final, TextIO

from lgrep.platform.logging import logger


KeyReader = Callable[[float], str | None]
"""Read one key, waiting at most the given number of seconds; ``None`` on timeout."""

ReaderFactory = Callable[[], AbstractContextManager[KeyReader]]


@contextmanager
def _posix_key_reader(stream: TextIO) -> Iterator[KeyReader]:
    import select
    import termios
    import tty

    fd = stream.fileno()
    saved = termios.tcgetattr(fd)
    _ = tty.setcbreak(fd)

    def read(timeout: float) -> str | None:
        ready, _, _ = select.select([fd], [], [], timeout)
        if not ready:
            return None
        data = os.read(fd, 1)
        return data.decode(errors="ignore") or None

    try:
        yield read
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


@contextmanager
def _windows_key_reader() -> Iterator[KeyReader]:
    import msvcrt

    def read(timeout: float) -> str | None:
        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            if msvcrt.kbhit():
                return msvcrt.getwch()
            time.sleep(0.02)
        return None

    yield read


def default_reader_factory(stream: TextIO) -> ReaderFactory | None:
    """Return a platform key reader for ``stream``, or ``None`` if it is not a terminal."""

    try:
        interactive = stream.isatty()
    except ValueError:
        interactive = False
    if not interactive:
        return None
    if sys.platform == "win32":
        return _windows_key_reader
    return lambda: _posix_key_reader(stream)


class KeypressListener:
    """Poll for keypresses on a daemon thread until stopped.

    ``on_key`` is called with each key; returning ``True`` ends listening.
    Use as a context manager so the terminal mode is always restored.
    """

    def __init__(
        self,
        on_key: Callable[[str], bool],
        *,
        stream: TextIO | None = None,
        reader_factory: ReaderFactory | None = None,
        poll_interval: float = 0.1,
    ) -> None:
        self._on_key: Final[Callable[[str], bool]] = on_key
        self._reader_factory: ReaderFactory | None = (
            reader_factory
            if reader_factory is not None
            else default_reader_factory(stream or sys.stdin)
        )
        self._poll_interval: float = poll_interval
        self._stop: Final[threading.Event] = threading.Event()
        self._thread: threading.Thread | None = None

    def start(self) -> bool:
        """Start listening. Returns ``False`` when no key reader is available."""

        if self._reader_factory is None:
            logger.debug("stdin is not a terminal; keypress listener disabled")
            return False
        if self._thread is not None:
            return True

        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="lgrep-keypress", daemon=True)
        self._thread.start()
        return True

    def stop(self) -> None:
        """Stop listening and wait for the terminal to be restored."""

        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def __enter__(self) -> KeypressListener:
        _ = self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def _run(self) -> None:
        assert self._reader_factory is not None
        try:
            with self._reader_factory() as read:
                while not self._stop.is_set():
                    key = read(self._poll_interval)
                    if key is None:
                        continue
                    if self._on_key(key):
                        return
        except Exception as exc:  # pragma: no cover
            logger.warning("Keypress listener stopped: %s", exc)


__all__ = ["KeyReader", "KeypressListener", "ReaderFactory", "default_reader_factory"]
