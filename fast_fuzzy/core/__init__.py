"""Core scoring and search functionality."""

from .engine import best_match, resolve_options, search
from .normalizer import TextNormalizer, normalize_string
from .scorer import fuzzy, levenshtein_distance, similarity

__all__ = [
    "search",
    "best_match",
    "resolve_options",
    "fuzzy",
    "similarity",
    "levenshtein_distance",
    "TextNormalizer",
    "normalize_string",
]
