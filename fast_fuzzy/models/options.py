"""Search options model."""

import math
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from ..config.settings import Settings


class SearchOptions(BaseModel):
    """
    Immutable configuration for a single search.

    ``threshold`` is clamped into ``[0, 1]``; ``limit`` is either None
    (unlimited) or a positive integer. Unknown option names are rejected.
    ``ignore_case`` also accepts its camelCase alias ``ignoreCase``.
    """

    threshold: float = Field(
        default=0.0, description="Minimum score for a candidate to be returned"
    )
    limit: Optional[int] = Field(
        default=None, ge=1, description="Maximum number of results, None for unlimited"
    )
    ignore_case: bool = Field(
        default=True, alias="ignoreCase", description="Fold case before comparison"
    )
    normalize: bool = Field(
        default=False, description="Strip diacritics and fold compatibility forms"
    )

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="forbid",
        populate_by_name=True,
    )

    @field_validator("threshold")
    @classmethod
    def clamp_threshold(cls, v: float) -> float:
        """Reject NaN and clamp the threshold into [0, 1]."""
        if math.isnan(v):
            raise ValueError("threshold must be a number, got NaN")
        return min(1.0, max(0.0, float(v)))

    @classmethod
    def from_settings(cls, settings: Optional["Settings"] = None) -> "SearchOptions":
        """Build options from the configured library defaults."""
        if settings is None:
            from ..config.settings import get_settings

            settings = get_settings()
        return cls(
            threshold=settings.default_threshold,
            limit=settings.default_limit,
            ignore_case=settings.default_ignore_case,
            normalize=settings.default_normalize,
        )
