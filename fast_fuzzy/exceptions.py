"""Exception types raised by fast_fuzzy."""


class FuzzySearchError(Exception):
    """Base class for all fast_fuzzy errors."""


class InvalidInputError(FuzzySearchError, TypeError):
    """A query, candidate or scorer argument is not a string."""


class InvalidOptionError(FuzzySearchError, ValueError):
    """A search option failed validation."""


def ensure_str(value: object, name: str) -> str:
    """Return ``value`` unchanged if it is a ``str``, else raise InvalidInputError."""
    if not isinstance(value, str):
        raise InvalidInputError(
            f"{name} must be str, got {type(value).__name__}"
        )
    return value


__all__ = [
    "FuzzySearchError",
    "InvalidInputError",
    "InvalidOptionError",
    "ensure_str",
]
