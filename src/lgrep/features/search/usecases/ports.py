"""Summary: Ports defining search use case collaborators.
Why: Keep output and diagnostics pluggable so the core stays testable without a console."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..domain import FileReadError, MatchEvent


@runtime_checkable
class MatchSink(Protocol):
    """Port receiving matches as they are counted."""

    def emit(self, event: MatchEvent) -> None:
        """Deliver one match. Calls are serialized by the coordinator."""
        ...


@runtime_checkable
class DiagnosticSink(Protocol):
    """Port receiving per-file failures that did not stop the search."""

    def report(self, error: FileReadError) -> None:
        """Record a recoverable per-file error. May be called from any worker."""
        ...


__all__ = ["DiagnosticSink", "MatchSink"]
