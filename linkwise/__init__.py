"""Singly linked list algorithms, an LRU cache, a text editor, a browser history and integer hash tables."""

__version__ = "0.1.0"

__all__ = [
    "browser_history",
    "hashmap",
    "hashset",
    "lru_cache",
    "node",
    "random_list",
    "text_editor",
    "transform",
    "traversal",
]