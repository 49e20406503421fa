# merge.py
# deep duplication and deep merging of tries.
#
# Subtrie ownership: duplicate() copies the subtrie *reference*, so a clone and
# its source point at the same subtrie object. merge() mutates its left operand
# in place (subtries included), which makes the change visible through every
# alias of that subtrie. Python's reference counting keeps a shared subtrie
# alive for as long as any node still points at it.

from __future__ import annotations

from .trie import ALPHABET_SIZE, Trie, create_node


def duplicate(source: Trie) -> Trie:
    """
    Clone the node structure of `source`. Counts are copied; subtries are
    shared with the source rather than copied.
    """
    if source is None:
        return None

    clone = create_node()
    clone.count = source.count
    clone.subtrie = source.subtrie
    clone.children = [duplicate(child) for child in source.children]
    return clone


def merge(a: Trie, b: Trie) -> Trie:
    """
    Fold `b` into `a` and return the result.

    - if either side is empty the other one is returned as is
    - counts of words present in both are summed and their subtries merged
    - subtrees only `b` has are attached to `a` without copying

    `a` is modified in place and `b` must not be used afterwards, parts of it
    now belong to `a`.
    """
    if a is None:
        return b
    if b is None:
        return a

    if b.count > 0:
        a.count += b.count
        a.subtrie = merge(a.subtrie, b.subtrie)

    for i in range(ALPHABET_SIZE):
        child = b.children[i]
        if child is not None:
            a.children[i] = merge(a.children[i], child)
    return a
