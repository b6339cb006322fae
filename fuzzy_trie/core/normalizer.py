"""Text normalization used for both stored search strings and queries."""


class TextNormalizer:
    """Folds text into the form the trie stores and compares."""

    def normalize(self, text: str) -> str:
        """
        Normalize text for storage and lookup.

        Only case is folded; whitespace, punctuation and accents are kept so
        that every character still counts towards the edit distance.

        Args:
            text: Input text to normalize

        Returns:
            Lowercased text
        """
        if not text:
            return ""

        return text.lower()
