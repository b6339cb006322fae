"""Performance benchmarks for the fuzzy trie."""

import random
import string

import pytest

from fuzzy_trie.core.distance import levenshtein_distance
from fuzzy_trie.core.trie import FuzzyTrie


class TestPerformanceBenchmarks:
    """Performance benchmark tests."""

    @pytest.fixture
    def large_trie(self):
        """Create a trie with a large dataset for performance testing."""
        rng = random.Random(42)
        trie = FuzzyTrie()

        for i in range(2000):
            length = rng.randint(4, 12)
            word = "".join(rng.choice(string.ascii_lowercase) for _ in range(length))
            trie.add_item(word, f"item_{i}")

        realistic_words = [
            "apple", "apricot", "banana", "blackberry", "blueberry",
            "cherry", "grape", "grapefruit", "lemon", "lime",
            "mango", "orange", "peach", "pear", "pineapple"
        ]
        for word in realistic_words:
            trie.add_item(word, word.title())

        return trie

    def test_exact_search_performance(self, large_trie, benchmark):
        """Benchmark an exact lookup over the whole trie."""
        result = benchmark(large_trie.search_items, "banana", 0)
        assert result[0] == "Banana"

    def test_fuzzy_search_performance(self, large_trie, benchmark):
        """Benchmark a typo-tolerant lookup."""
        result = benchmark(large_trie.search_items, "pinaple", 2)
        assert "Pineapple" in result

    def test_insertion_performance(self, benchmark):
        """Benchmark building a trie."""
        words = [f"word_{i}" for i in range(1000)]

        def build():
            trie = FuzzyTrie()
            for word in words:
                trie.add_item(word, word)
            return trie

        trie = benchmark(build)
        assert len(trie) == 1000

    def test_early_exit_distance(self, benchmark):
        """Benchmark the distance metric when the budget cuts it short."""
        first = "a" * 200
        second = "b" * 200

        result = benchmark(levenshtein_distance, first, second, 2)
        assert result == 3
