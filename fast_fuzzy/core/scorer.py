"""Edit-distance based similarity scoring.

Scores are ``1 - distance / max(len(a), len(b))`` over Unicode code points,
clamped to ``[0, 1]``. The distance table is O(len(a) * len(b)), which is fine
for names and words but not meant for long documents.
"""

from rapidfuzz.distance import Levenshtein

from ..exceptions import ensure_str
from .normalizer import normalize_string


def levenshtein_distance(a: str, b: str) -> int:
    """
    Unit-cost edit distance (insertions, deletions, substitutions).

    Example:
        >>> levenshtein_distance("kitten", "sitting")
        3
    """
    ensure_str(a, "a")
    ensure_str(b, "b")
    return Levenshtein.distance(a, b)


def similarity(a: str, b: str) -> float:
    """
    Similarity of two already-prepared strings, in [0, 1].

    Identical strings (including two empty ones) score 1.0; an empty string
    against a non-empty one scores 0.0.
    """
    if a == b:
        return 1.0
    if not a or not b:
        return 0.0

    distance = Levenshtein.distance(a, b)
    max_len = max(len(a), len(b))
    return min(1.0, max(0.0, 1.0 - distance / max_len))


def fuzzy(a: str, b: str, normalize: bool = False, *, ignore_case: bool = False) -> float:
    """
    Compute the similarity score between two strings.

    Args:
        a: First string
        b: Second string
        normalize: Strip diacritics, fold compatibility forms and case
            before scoring, so ``fuzzy("café", "Cafe", True) == 1.0``
        ignore_case: Fold case only, independent of ``normalize``

    Returns:
        Similarity score between 0 and 1

    Raises:
        InvalidInputError: If either argument is not a string.
    """
    ensure_str(a, "a")
    ensure_str(b, "b")

    if normalize:
        a = normalize_string(a, ignore_case=True, strip_accents=True)
        b = normalize_string(b, ignore_case=True, strip_accents=True)
    elif ignore_case:
        a = a.casefold()
        b = b.casefold()

    return similarity(a, b)
