"""Unit tests for search options and results."""

import pytest
from pydantic import ValidationError

from fast_fuzzy.config.settings import Settings
from fast_fuzzy.models import SearchOptions, SearchResult


class TestSearchOptions:
    """Test cases for SearchOptions validation."""

    def test_defaults(self):
        """Test default option values."""
        options = SearchOptions()
        assert options.threshold == 0.0
        assert options.limit is None
        assert options.ignore_case is True
        assert options.normalize is False

    def test_camel_case_alias(self):
        """Test that ignoreCase is accepted as an alias."""
        options = SearchOptions.model_validate({"ignoreCase": False})
        assert options.ignore_case is False
        assert SearchOptions(ignore_case=False).ignore_case is False

    @pytest.mark.parametrize("value,expected", [
        (-0.5, 0.0),
        (0.5, 0.5),
        (1.5, 1.0),
        (1, 1.0),
    ])
    def test_threshold_clamped(self, value, expected):
        """Test that out-of-range thresholds are clamped."""
        assert SearchOptions(threshold=value).threshold == expected

    def test_threshold_nan_rejected(self):
        """Test that a NaN threshold is rejected."""
        with pytest.raises(ValidationError):
            SearchOptions(threshold=float("nan"))

    @pytest.mark.parametrize("limit", [0, -1])
    def test_non_positive_limit_rejected(self, limit):
        """Test that a non-positive limit is a validation error."""
        with pytest.raises(ValidationError):
            SearchOptions(limit=limit)

    @pytest.mark.parametrize("field,value", [
        ("limit", "3"),
        ("limit", 2.5),
        ("ignore_case", "yes"),
        ("normalize", 1),
        ("threshold", "0.5"),
    ])
    def test_wrong_types_rejected(self, field, value):
        """Test that values are not coerced across types."""
        with pytest.raises(ValidationError):
            SearchOptions(**{field: value})

    def test_unknown_option_rejected(self):
        """Test that unknown option names are rejected."""
        with pytest.raises(ValidationError):
            SearchOptions.model_validate({"treshold": 0.5})

    def test_immutable(self):
        """Test that options cannot be changed after construction."""
        options = SearchOptions()
        with pytest.raises(ValidationError):
            options.threshold = 0.9

    def test_from_settings(self):
        """Test building options from library settings."""
        settings = Settings(default_threshold=0.4, default_limit=5, default_normalize=True)
        options = SearchOptions.from_settings(settings)
        assert options.threshold == 0.4
        assert options.limit == 5
        assert options.normalize is True
        assert options.ignore_case is True


class TestSearchResult:
    """Test cases for SearchResult."""

    def test_equality(self):
        """Test that results compare by value."""
        assert SearchResult(item="apple", score=1.0, index=0) == SearchResult(
            item="apple", score=1.0, index=0
        )

    def test_score_bounds(self):
        """Test that scores outside [0, 1] are rejected."""
        with pytest.raises(ValidationError):
            SearchResult(item="apple", score=1.5, index=0)
