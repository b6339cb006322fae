"""Core fuzzy search functionality."""

from .distance import bounded_distance, levenshtein_distance
from .filter import FuzzyFilter
from .normalizer import TextNormalizer
from .trie import FuzzyTrie, TrieNode

__all__ = [
    "FuzzyTrie",
    "TrieNode",
    "FuzzyFilter",
    "TextNormalizer",
    "bounded_distance",
    "levenshtein_distance",
]
