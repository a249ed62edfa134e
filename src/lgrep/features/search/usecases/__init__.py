"""Search use cases: enumeration, scanning and concurrent coordination."""

from .cancellation import CancellationSignal
from .file_enumerator import enumerate_candidates
from .line_scanner import LineScanner, fold_case, line_matches
from .ports import DiagnosticSink, MatchSink
from .search_coordinator import SearchCoordinator
from .search_state import SharedSearchState
from .search_types import FileOutcome, SearchEvent, SearchLogContext, new_run_id

__all__ = [
    "CancellationSignal",
    "DiagnosticSink",
    "FileOutcome",
    "LineScanner",
    "MatchSink",
    "SearchCoordinator",
    "SearchEvent",
    "SearchLogContext",
    "SharedSearchState",
    "enumerate_candidates",
    "fold_case",
    "line_matches",
    "new_run_id",
]
