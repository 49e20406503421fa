# printer.py
# renders tries as text and answers single-word co-occurrence queries.

from __future__ import annotations
import sys
from enum import Enum
from typing import Iterable, Optional, TextIO

from .errors import InvalidWordError
from .trie import Trie, iter_words, lookup

PRINT_ALL = "!"
SUBTRIE_LABEL = "- "
INVALID = "(INVALID STRING)"
EMPTY = "(EMPTY)"


class QueryStatus(Enum):
    FOUND = "found"
    INVALID = "invalid"  # absent, count 0, or not a letters-only word
    EMPTY = "empty"  # a word, but nothing co-occurred with it


def print_trie(root: Trie, stream: Optional[TextIO] = None, label: str = "") -> None:
    """Write `<label><word> (<count>)` for every word, in letter order."""
    out = stream or sys.stdout
    for word, node in iter_words(root):
        out.write(f"{label}{word} ({node.count})\n")


def query(root: Trie, word: str, stream: Optional[TextIO] = None, label: str = SUBTRIE_LABEL) -> QueryStatus:
    """Print the co-occurrence subtrie of `word`, or why there is none."""
    out = stream or sys.stdout
    try:
        node = lookup(root, word)
    except InvalidWordError:
        node = None

    if node is None or node.count == 0:
        out.write(INVALID + "\n")
        return QueryStatus.INVALID
    if node.subtrie is None:
        out.write(EMPTY + "\n")
        return QueryStatus.EMPTY
    print_trie(node.subtrie, out, label)
    return QueryStatus.FOUND


def run_queries(
    root: Trie,
    tokens: Iterable[str],
    stream: Optional[TextIO] = None,
    label: str = SUBTRIE_LABEL,
) -> None:
    """
    Query-file loop: `!` prints the whole trie; any other token is echoed as
    written, lower-cased and queried.
    """
    out = stream or sys.stdout
    for token in tokens:
        if token == PRINT_ALL:
            print_trie(root, out)
            continue
        out.write(token + "\n")
        query(root, token.lower(), out, label)
