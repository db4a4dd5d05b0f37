"""Data models for fast_fuzzy."""

from .options import SearchOptions
from .result import SearchResult

__all__ = [
    "SearchOptions",
    "SearchResult",
]
