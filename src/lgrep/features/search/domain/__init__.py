# Where: lgrep.features.search.domain
# What: Value objects and error taxonomy for text search.
# Why: Keep the data model free of threading and I/O concerns.

from .errors import DirectoryError, EmptySearchTermError, FileReadError, SearchError
from .models import MatchEvent, SearchOutcome, SearchRequest, SearchSummary

__all__ = [
    "DirectoryError",
    "EmptySearchTermError",
    "FileReadError",
    "MatchEvent",
    "SearchError",
    "SearchOutcome",
    "SearchRequest",
    "SearchSummary",
]
