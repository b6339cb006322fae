"""Configuration management for the fuzzy trie."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
