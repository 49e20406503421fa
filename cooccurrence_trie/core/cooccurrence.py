# cooccurrence.py
# attaches to every word of a sentence trie the trie of the other words in it.

from __future__ import annotations

from .deletion import delete_occurrences
from .merge import duplicate
from .trie import Trie, iter_words


def build_cooccurrence(sentence: Trie) -> Trie:
    """
    Give each word W of `sentence` a subtrie holding every other word of the
    sentence with its count in that sentence. W itself is removed from its
    own subtrie.

    Every word gets its own clone of the sentence before W is deleted from it,
    so no two words share a subtrie and pruning one cannot change another.

    The sentence trie is modified in place and returned.
    """
    if sentence is None:
        return None

    base = duplicate(sentence)
    for word, node in iter_words(sentence):
        node.subtrie = delete_occurrences(duplicate(base), word)
    return sentence
