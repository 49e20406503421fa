"""
cooccurrence_trie.core

The trie engine:
 - letter trie nodes and primitives (trie)
 - deep duplication with shared subtries, and deep merge (merge)
 - pruning deletion (deletion)
 - per-sentence co-occurrence subtries (cooccurrence)
 - the sentence-by-sentence corpus driver (corpus_builder)
 - text rendering and queries (printer)
"""

from .errors import TrieError, InvalidWordError, NotFoundError
from .trie import TrieNode, create_node, insert, lookup, has_children, iter_words
from .merge import duplicate, merge
from .deletion import delete_occurrences
from .cooccurrence import build_cooccurrence
from .corpus_builder import CorpusBuilder, CorpusStats, SentenceState, build_trie
from .printer import QueryStatus, print_trie, query, run_queries

__all__ = [
    "TrieError",
    "InvalidWordError",
    "NotFoundError",
    "TrieNode",
    "create_node",
    "insert",
    "lookup",
    "has_children",
    "iter_words",
    "duplicate",
    "merge",
    "delete_occurrences",
    "build_cooccurrence",
    "CorpusBuilder",
    "CorpusStats",
    "SentenceState",
    "build_trie",
    "QueryStatus",
    "print_trie",
    "query",
    "run_queries",
]
