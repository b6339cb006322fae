"""Prefix tree that stores payload items and answers fuzzy lookups."""

import time
from typing import Any, Dict, Generic, Iterator, List, Optional, Tuple, TypeVar

from ..models.response import ScoredMatch
from .distance import Budget, bounded_distance
from .normalizer import TextNormalizer

T = TypeVar("T")


class TrieNode(Generic[T]):
    """
    A single node in the trie.

    children: normalized char -> TrieNode, owned exclusively by this node
    is_terminal: True once some search string ends exactly here
    entries: (item, normalized search string) pairs in insertion order
    """

    __slots__ = ("children", "is_terminal", "entries")

    def __init__(self) -> None:
        self.children: Dict[str, "TrieNode[T]"] = {}
        self.is_terminal = False
        self.entries: List[Tuple[T, str]] = []


class FuzzyTrie(Generic[T]):
    """
    Trie mapping normalized search strings to arbitrary items, searched by
    Levenshtein distance.

    Every search walks the whole trie and scores every stored entry, so a
    query costs O(stored entries x comparison cost). Nodes are only ever
    added; the structure is dropped as a whole with the instance.

    Not thread safe: callers sharing an instance across threads must hold
    their own lock around both insertion and search.
    """

    def __init__(self) -> None:
        """Initialize an empty trie."""
        self._root: TrieNode[T] = TrieNode()
        self.normalizer = TextNormalizer()
        self._stats = {
            "total_entries": 0,
            "total_nodes": 1,
            "terminal_nodes": 0,
            "last_updated": None
        }

    # insertion -----------------------------------------------------

    def add_item(self, search_string: str, item: T) -> None:
        """
        Store an item under a search string.

        The search string is lowercased first. Empty strings are legal and
        mark the root itself as terminal. Duplicate search strings are not
        merged: each call appends a new entry.

        Args:
            search_string: Text the item should be found by
            item: Payload returned by searches, never inspected
        """
        normalized = self.normalizer.normalize(search_string)

        node = self._root
        for char in normalized:
            child = node.children.get(char)
            if child is None:
                child = TrieNode()
                node.children[char] = child
                self._stats["total_nodes"] += 1
            node = child

        if not node.is_terminal:
            node.is_terminal = True
            self._stats["terminal_nodes"] += 1
        node.entries.append((item, normalized))

        self._stats["total_entries"] += 1
        self._stats["last_updated"] = time.time()

    add_item_to_trie = add_item

    # search/traversal ----------------------------------------------

    def search_items(self, query: str, max_allowed_distance: Budget = 2) -> List[T]:
        """
        Find items whose search strings are within a distance budget.

        Args:
            query: Search query, compared case-insensitively
            max_allowed_distance: Largest accepted Levenshtein distance

        Returns:
            Items ordered by ascending distance; ties keep traversal order
        """
        return [item for _, item, _ in self._rank(query, max_allowed_distance)]

    def search_matches(
        self,
        query: str,
        max_allowed_distance: Budget = 2
    ) -> List[ScoredMatch]:
        """
        Same as :meth:`search_items`, keeping each hit's distance and search string.

        Args:
            query: Search query, compared case-insensitively
            max_allowed_distance: Largest accepted Levenshtein distance

        Returns:
            List of ScoredMatch objects ordered by ascending distance
        """
        return [
            ScoredMatch(item=item, search_string=search_string, distance=distance)
            for distance, item, search_string in self._rank(query, max_allowed_distance)
        ]

    def iter_entries(self) -> Iterator[Tuple[str, T]]:
        """
        Yield (normalized search string, item) for every stored entry.

        Nodes are visited depth first: a node's own entries come before its
        children, children in ascending character order, entries within a
        node in insertion order. Searches rank in this order too.
        """
        stack = [self._root]
        while stack:
            node = stack.pop()
            if node.is_terminal:
                for item, search_string in node.entries:
                    yield search_string, item
            # reversed so the smallest character is popped first
            for char in sorted(node.children, reverse=True):
                stack.append(node.children[char])

    def _rank(
        self,
        query: str,
        max_allowed_distance: Budget
    ) -> List[Tuple[int, T, str]]:
        """Score every entry, drop the ones over budget, sort by distance."""
        normalized_query = self.normalizer.normalize(query)

        matches: List[Tuple[int, T, str]] = []
        for search_string, item in self.iter_entries():
            distance = bounded_distance(
                normalized_query, search_string, max_allowed_distance
            )
            if distance is not None:
                matches.append((distance, item, search_string))

        # list.sort is stable, equal distances keep discovery order
        matches.sort(key=lambda match: match[0])
        return matches

    # utilities -----------------------------------------------------

    def __len__(self) -> int:
        """Number of stored entries, duplicates included."""
        return self._stats["total_entries"]

    def __contains__(self, search_string: object) -> bool:
        """True if some entry was stored under exactly this (normalized) string."""
        if not isinstance(search_string, str):
            return False

        node: Optional[TrieNode[T]] = self._root
        for char in self.normalizer.normalize(search_string):
            node = node.children.get(char)
            if node is None:
                return False
        return node.is_terminal

    def get_stats(self) -> Dict[str, Any]:
        """Get trie statistics."""
        return self._stats.copy()
