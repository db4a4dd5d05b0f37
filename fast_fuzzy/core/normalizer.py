"""Text normalization utilities for accent- and case-insensitive comparison."""

import re
import unicodedata

from ..exceptions import ensure_str


_WHITESPACE_RE = re.compile(r"\s+")


def normalize_string(text: str, ignore_case: bool = True, strip_accents: bool = True) -> str:
    """
    Produce the canonical comparison form of a string.

    Args:
        text: Input text to normalize
        ignore_case: Fold the text to a single case
        strip_accents: Decompose with NFKD, drop combining marks and
            collapse runs of whitespace into single spaces

    Returns:
        Normalized text, possibly shorter than the input

    Example:
        >>> normalize_string("Café")
        'cafe'
        >>> normalize_string("ＡＢＣ  def", ignore_case=False)
        'ABC def'
    """
    ensure_str(text, "text")
    if not text:
        return ""

    normalized = text

    if strip_accents:
        # NFKD also maps full-width and other compatibility forms to base characters
        normalized = unicodedata.normalize("NFKD", normalized)
        normalized = "".join(ch for ch in normalized if not unicodedata.combining(ch))
        normalized = _WHITESPACE_RE.sub(" ", normalized).strip()

    if ignore_case:
        normalized = normalized.casefold()

    return normalized


class TextNormalizer:
    """Handles text normalization for consistent comparison."""

    def __init__(self, ignore_case: bool = True, strip_accents: bool = False) -> None:
        """
        Initialize the normalizer.

        Args:
            ignore_case: Fold case before comparison
            strip_accents: Strip diacritics and fold compatibility forms
        """
        self.ignore_case = ignore_case
        self.strip_accents = strip_accents

    @property
    def is_identity(self) -> bool:
        """True when normalization leaves text untouched."""
        return not (self.ignore_case or self.strip_accents)

    def normalize(self, text: str) -> str:
        """
        Normalize text according to this normalizer's flags.

        Args:
            text: Input text to normalize

        Returns:
            Normalized text
        """
        if self.is_identity:
            return ensure_str(text, "text")
        return normalize_string(text, self.ignore_case, self.strip_accents)

    def __repr__(self) -> str:
        return (
            f"TextNormalizer(ignore_case={self.ignore_case}, "
            f"strip_accents={self.strip_accents})"
        )
