"""Request-side models: options that shape a fuzzy filter search."""

from pydantic import BaseModel, Field


class FilterOptions(BaseModel):
    """Options controlling how a FuzzyFilter answers queries."""

    min_search_length: int = Field(
        default=1, ge=0, description="Shortest query that triggers a search"
    )
    max_distance: int = Field(
        default=2, ge=0, description="Maximum Levenshtein distance for a match"
    )
    max_results: int = Field(
        default=10, ge=1, description="Maximum number of suggestions to keep"
    )
    debounce_ms: int = Field(
        default=150, ge=0, description="Suggested debounce delay for callers, in milliseconds"
    )
