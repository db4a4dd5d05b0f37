"""Search result model."""

from pydantic import BaseModel, ConfigDict, Field


class SearchResult(BaseModel):
    """Individual search result."""

    item: str = Field(..., description="The original, unmodified candidate")
    score: float = Field(..., ge=0.0, le=1.0, description="Similarity score (0-1)")
    index: int = Field(..., ge=0, description="Position of the candidate in the input")

    model_config = ConfigDict(frozen=True)
