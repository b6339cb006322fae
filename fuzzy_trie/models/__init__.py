"""Data models for the fuzzy trie."""

from .request import FilterOptions
from .response import ScoredMatch, SearchResponse

__all__ = [
    "FilterOptions",
    "ScoredMatch",
    "SearchResponse",
]
