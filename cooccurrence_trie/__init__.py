"""
cooccurrence_trie

Builds a letter trie of word counts from a corpus where every word also carries
a subtrie of the words that shared a sentence with it, and answers queries
against it.
"""

from .core import (
    CorpusBuilder,
    build_trie,
    build_cooccurrence,
    delete_occurrences,
    duplicate,
    insert,
    lookup,
    merge,
    print_trie,
    query,
)

__all__ = [
    "CorpusBuilder",
    "build_trie",
    "build_cooccurrence",
    "delete_occurrences",
    "duplicate",
    "insert",
    "lookup",
    "merge",
    "print_trie",
    "query",
]

__version__ = "0.1.0"
