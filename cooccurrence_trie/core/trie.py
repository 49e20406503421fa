# trie.py
# 26-ary letter trie with per-word occurrence counts and co-occurrence subtries.
# An empty trie is represented by None, so every operation that can create the
# root returns it.

from __future__ import annotations
import re
from typing import Iterator, List, Optional, Tuple

from .errors import InvalidWordError

ALPHABET_SIZE = 26

_word_re = re.compile(r"[a-z]+")


class TrieNode:
    """
    A single letter of a path in the trie.
    count: how many times the word ending here occurs (0 = prefix only)
    children: 26 slots, a..z, None where the letter does not extend the path
    subtrie: words co-occurring with this word; may be shared with the node
             this one was duplicated from
    """

    __slots__ = ("count", "children", "subtrie")

    def __init__(self) -> None:
        self.count = 0
        self.children: List[Optional[TrieNode]] = [None] * ALPHABET_SIZE
        self.subtrie: Optional[TrieNode] = None

    def has_children(self) -> bool:
        return any(child is not None for child in self.children)

    def __repr__(self) -> str:
        letters = "".join(letter_of(i) for i, c in enumerate(self.children) if c is not None)
        return f"TrieNode(count={self.count}, children={letters!r}, subtrie={self.subtrie is not None})"


Trie = Optional[TrieNode]


def create_node() -> TrieNode:
    return TrieNode()


def has_children(node: TrieNode) -> bool:
    return node.has_children()


# letters <-> slots ---------------------------------------------------------
def check_word(word: str) -> str:
    """Raise InvalidWordError unless `word` is one or more lowercase a-z letters."""
    if not isinstance(word, str) or not _word_re.fullmatch(word):
        raise InvalidWordError(word)
    return word


def slot_of(letter: str) -> int:
    return ord(letter) - ord("a")


def letter_of(slot: int) -> str:
    return chr(ord("a") + slot)


# insertion -----------------------------------------------------------------
def insert(root: Trie, word: str) -> TrieNode:
    """
    Add one occurrence of `word`, creating missing nodes along the way.
    Returns the root, which is new when `root` was None.
    """
    check_word(word)
    if root is None:
        root = create_node()

    node = root
    for ch in word:
        i = slot_of(ch)
        nxt = node.children[i]
        if nxt is None:
            nxt = create_node()
            node.children[i] = nxt
        node = nxt
    node.count += 1
    return root


# search/traversal ----------------------------------------------------------
def lookup(root: Trie, word: str) -> Optional[TrieNode]:
    """
    Return the node at the end of `word`'s path, or None if the path breaks.
    The node may have count 0 when `word` is only a prefix of stored words.
    """
    check_word(word)
    node = root
    for ch in word:
        if node is None:
            return None
        node = node.children[slot_of(ch)]
    return node


def iter_words(root: Trie, prefix: str = "") -> Iterator[Tuple[str, TrieNode]]:
    """
    Depth-first, pre-order walk in letter order yielding (word, node) for every
    node with a nonzero count. Zero-count nodes are still descended into.
    Recursion depth is the length of the longest stored word.
    """
    if root is None:
        return
    if root.count > 0:
        yield prefix, root
    for i, child in enumerate(root.children):
        if child is not None:
            yield from iter_words(child, prefix + letter_of(i))


# convenience/debugging -----------------------------------------------------
def word_count(root: Trie) -> int:
    """Number of distinct words (nodes with count > 0)."""
    return sum(1 for _ in iter_words(root))


def count_nodes(root: Trie) -> int:
    """Number of nodes in the trie itself, subtries not included."""
    if root is None:
        return 0
    return 1 + sum(count_nodes(child) for child in root.children)


def as_counts(root: Trie) -> dict:
    """Flatten a trie to {word: count}. Handy for tests and inspection."""
    return {word: node.count for word, node in iter_words(root)}
