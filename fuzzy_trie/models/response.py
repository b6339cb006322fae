"""Response-side models for scored fuzzy search results."""

from datetime import datetime, timezone
from typing import Any, List

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ScoredMatch(BaseModel):
    """Individual search hit with its distance from the query."""

    item: Any = Field(..., description="The stored payload, returned untouched")
    search_string: str = Field(..., description="Normalized search string the item was stored under")
    distance: int = Field(..., ge=0, description="Levenshtein distance from the normalized query")


class SearchResponse(BaseModel):
    """Response for a fuzzy filter search."""

    query: str = Field(..., description="Original search query")
    normalized_query: str = Field(..., description="Query after case folding")
    max_distance: int = Field(..., description="Distance budget used for the search")
    total_results: int = Field(..., description="Number of results returned")
    results: List[ScoredMatch] = Field(..., description="Matches ordered by ascending distance")
    skipped: bool = Field(default=False, description="Whether the query was too short to search")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    timestamp: datetime = Field(default_factory=_utcnow, description="Response timestamp")
