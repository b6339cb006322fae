"""
Fuzzy Trie - approximate lookup of arbitrary items by search string.

Items are stored in a prefix tree under lowercased search strings and
retrieved by Levenshtein distance, closest matches first.
"""

__version__ = "1.0.0"

from .core.distance import bounded_distance, levenshtein_distance
from .core.filter import FuzzyFilter
from .core.trie import FuzzyTrie
from .models.request import FilterOptions
from .models.response import ScoredMatch, SearchResponse

__all__ = [
    "FuzzyTrie",
    "FuzzyFilter",
    "FilterOptions",
    "ScoredMatch",
    "SearchResponse",
    "bounded_distance",
    "levenshtein_distance",
]
