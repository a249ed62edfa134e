"""Application services."""

from .search_service import TextSearchService

__all__ = ["TextSearchService"]
