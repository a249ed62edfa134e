# Where: lgrep.features.search.__init__
# What: Expose the search engine, its value objects and its ports.
# Why: Provide a cohesive import surface for the application and UI layers.

from .adapters import LoggingDiagnosticSink
from .domain import (
    DirectoryError,
    EmptySearchTermError,
    FileReadError,
    MatchEvent,
    SearchError,
    SearchOutcome,
    SearchRequest,
    SearchSummary,
)
from .usecases import (
    CancellationSignal,
    DiagnosticSink,
    LineScanner,
    MatchSink,
    SearchCoordinator,
    SearchEvent,
    enumerate_candidates,
)

__all__ = [
    "CancellationSignal",
    "DiagnosticSink",
    "DirectoryError",
    "EmptySearchTermError",
    "FileReadError",
    "LineScanner",
    "LoggingDiagnosticSink",
    "MatchEvent",
    "MatchSink",
    "SearchCoordinator",
    "SearchError",
    "SearchEvent",
    "SearchOutcome",
    "SearchRequest",
    "SearchSummary",
    "enumerate_candidates",
]
