"""Fuzzy filter over a collection of items, backed by a FuzzyTrie."""

import time
from typing import Any, Callable, Dict, Generic, Iterable, List, Optional, TypeVar

import structlog

from ..config import get_settings
from ..models.request import FilterOptions
from ..models.response import ScoredMatch, SearchResponse
from .trie import FuzzyTrie

T = TypeVar("T")

logger = structlog.get_logger(__name__)


class FuzzyFilter(Generic[T]):
    """
    Keeps one trie per item collection and answers suggestion queries.

    The trie is rebuilt from scratch whenever the collection changes. Queries
    shorter than ``min_search_length`` are not searched and clear the
    suggestions; longer ones keep at most ``max_results`` closest items.
    Debouncing input is left to the caller.
    """

    def __init__(
        self,
        get_search_string: Callable[[T], str],
        items: Iterable[T] = (),
        options: Optional[FilterOptions] = None
    ) -> None:
        """
        Initialize the fuzzy filter.

        Args:
            get_search_string: Returns the text each item is found by
            items: Initial item collection
            options: Search options (defaults from settings if None)
        """
        if options is None:
            settings = get_settings()
            options = FilterOptions(
                min_search_length=settings.min_search_length,
                max_distance=settings.default_max_distance,
                max_results=settings.max_results,
                debounce_ms=settings.debounce_ms
            )

        self.options = options
        self.get_search_string = get_search_string
        self.trie: FuzzyTrie[T] = FuzzyTrie()
        self.suggestions: List[T] = []
        self._stats = self._empty_stats()

        self.load_items(items)

    def load_items(self, items: Iterable[T]) -> None:
        """
        Replace the item collection and rebuild the trie.

        Args:
            items: Items to index, inserted in iteration order
        """
        trie: FuzzyTrie[T] = FuzzyTrie()
        for item in items:
            try:
                search_string = self.get_search_string(item)
            except Exception as e:
                logger.error("Failed to derive search string", item=repr(item), error=str(e))
                raise
            trie.add_item(search_string, item)

        self.trie = trie
        logger.debug("Trie rebuilt", total_items=len(trie))

    def search(self, term: str) -> List[T]:
        """
        Update and return the suggestions for a search term.

        Args:
            term: Raw search term as typed by the user

        Returns:
            The closest items, at most ``max_results`` of them
        """
        return [match.item for match in self.search_response(term).results]

    def search_response(self, term: str) -> SearchResponse:
        """
        Search and return scored matches with timing metadata.

        Args:
            term: Raw search term as typed by the user

        Returns:
            SearchResponse with results and metadata
        """
        start_time = time.time()
        self._stats["total_queries"] += 1

        if len(term) < self.options.min_search_length:
            self.suggestions = []
            self._stats["skipped_queries"] += 1
            return self._create_response(term, [], start_time, skipped=True)

        matches = self.trie.search_matches(term, self.options.max_distance)
        results = matches[:self.options.max_results]
        self.suggestions = [match.item for match in results]

        if results:
            self._stats["matched_queries"] += 1
        else:
            self._stats["unmatched_queries"] += 1

        response = self._create_response(term, results, start_time)
        logger.debug(
            "Search completed",
            query=term,
            total_results=response.total_results,
            execution_time_ms=response.execution_time_ms
        )
        return response

    def _create_response(
        self,
        term: str,
        results: List[ScoredMatch],
        start_time: float,
        skipped: bool = False
    ) -> SearchResponse:
        execution_time = (time.time() - start_time) * 1000
        self._stats["total_execution_time"] += execution_time

        return SearchResponse(
            query=term,
            normalized_query=self.trie.normalizer.normalize(term),
            max_distance=self.options.max_distance,
            total_results=len(results),
            results=results,
            skipped=skipped,
            execution_time_ms=execution_time
        )

    @staticmethod
    def _empty_stats() -> Dict[str, Any]:
        return {
            "total_queries": 0,
            "matched_queries": 0,
            "unmatched_queries": 0,
            "skipped_queries": 0,
            "total_execution_time": 0.0
        }

    def get_stats(self) -> Dict[str, Any]:
        """Get filter statistics."""
        stats = self._stats.copy()

        if stats["total_queries"] > 0:
            stats["average_execution_time_ms"] = (
                stats["total_execution_time"] / stats["total_queries"]
            )
        else:
            stats["average_execution_time_ms"] = 0.0

        stats["trie_stats"] = self.trie.get_stats()

        return stats

    def clear(self) -> None:
        """Drop all items, suggestions and statistics."""
        self.trie = FuzzyTrie()
        self.suggestions = []
        self._stats = self._empty_stats()
