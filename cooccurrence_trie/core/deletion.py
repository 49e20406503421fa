# deletion.py
# removes word occurrences and prunes the path segments left without purpose.

from __future__ import annotations
from typing import Optional

from .errors import NotFoundError
from .trie import Trie, TrieNode, check_word, lookup, slot_of


def delete_occurrences(root: Trie, word: str, occurrences: Optional[int] = None) -> Trie:
    """
    Remove occurrences of `word` and return the new root.

    occurrences=None removes all of them; an int removes that many.
    Once a word's count reaches 0 its subtrie reference is dropped, and if the
    node has no children it is discarded together with every ancestor that is
    left childless with a zero count. Returns None if nothing is left.

    Raises NotFoundError when the word is absent or holds fewer occurrences
    than requested. The trie is untouched in that case.
    """
    check_word(word)
    node = lookup(root, word)
    if node is None or node.count == 0:
        raise NotFoundError(word)
    if occurrences is not None:
        if occurrences < 1:
            raise ValueError(f"occurrences must be positive, got {occurrences}")
        if occurrences > node.count:
            raise NotFoundError(word, f"only {node.count} occurrence(s), asked to delete {occurrences}")

    return _delete(root, word, 0, occurrences)


def _delete(node: TrieNode, word: str, depth: int, occurrences: Optional[int]) -> Optional[TrieNode]:
    """Walk down `word`, update the terminal node, prune on the way back up."""
    if depth == len(word):
        node.count = 0 if occurrences is None else node.count - occurrences
        if node.count == 0:
            node.subtrie = None
    else:
        i = slot_of(word[depth])
        node.children[i] = _delete(node.children[i], word, depth + 1, occurrences)

    if node.count == 0 and not node.has_children():
        return None
    return node
