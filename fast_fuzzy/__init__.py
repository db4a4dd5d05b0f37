"""
fast_fuzzy - approximate string matching for short strings.

Scores candidates against a query by Levenshtein similarity and returns them
ranked, with optional case folding, accent folding, a score threshold and a
result limit.

Example usage:
    >>> import fast_fuzzy as ff
    >>> ff.fuzzy("café", "cafe", normalize=True)
    1.0
    >>> [r.item for r in ff.search("aple", ["apple", "banana", "maple"], threshold=0.5)]
    ['apple', 'maple']
"""

__version__ = "1.0.0"

from .config import Settings, configure_logging, get_settings
from .core.engine import best_match, search
from .core.normalizer import TextNormalizer, normalize_string
from .core.scorer import fuzzy, levenshtein_distance
from .exceptions import FuzzySearchError, InvalidInputError, InvalidOptionError
from .models import SearchOptions, SearchResult

__all__ = [
    "fuzzy",
    "search",
    "best_match",
    "levenshtein_distance",
    "normalize_string",
    "TextNormalizer",
    "SearchOptions",
    "SearchResult",
    "Settings",
    "get_settings",
    "configure_logging",
    "FuzzySearchError",
    "InvalidInputError",
    "InvalidOptionError",
]
