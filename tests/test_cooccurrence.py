# tests/test_cooccurrence.py
# per-sentence co-occurrence subtries

from cooccurrence_trie.core.cooccurrence import build_cooccurrence
from cooccurrence_trie.core.deletion import delete_occurrences
from cooccurrence_trie.core.merge import duplicate
from cooccurrence_trie.core.trie import as_counts, iter_words, lookup


def test_each_word_gets_the_others(make_trie):
    sentence = make_trie("alpha", "beta", "gamma")
    out = build_cooccurrence(sentence)

    assert out is sentence
    assert as_counts(lookup(out, "alpha").subtrie) == {"beta": 1, "gamma": 1}
    assert as_counts(lookup(out, "beta").subtrie) == {"alpha": 1, "gamma": 1}
    assert as_counts(lookup(out, "gamma").subtrie) == {"alpha": 1, "beta": 1}


def test_word_never_in_its_own_subtrie(make_trie):
    out = build_cooccurrence(make_trie("the", "the", "cat", "then"))
    for word, node in iter_words(out):
        sub = lookup(node.subtrie, word)
        assert sub is None or sub.count == 0


def test_sentence_counts_carry_into_subtries(make_trie):
    out = build_cooccurrence(make_trie("the", "cat", "the"))
    assert as_counts(out) == {"cat": 1, "the": 2}
    assert as_counts(lookup(out, "cat").subtrie) == {"the": 2}
    assert as_counts(lookup(out, "the").subtrie) == {"cat": 1}


def test_prefix_words_keep_each_other(make_trie):
    out = build_cooccurrence(make_trie("car", "cart"))
    assert as_counts(lookup(out, "car").subtrie) == {"cart": 1}
    assert as_counts(lookup(out, "cart").subtrie) == {"car": 1}


def test_subtries_are_independent(make_trie):
    out = build_cooccurrence(make_trie("alpha", "beta", "gamma"))
    alpha = lookup(out, "alpha").subtrie
    beta = lookup(out, "beta").subtrie
    assert alpha is not beta

    delete_occurrences(alpha, "gamma")
    assert as_counts(beta) == {"alpha": 1, "gamma": 1}


def test_shared_base_would_lose_other_words(make_trie):
    # Deleting each word from one shared clone instead of a clone per word
    # strips every earlier word too; build_cooccurrence must not behave so.
    sentence = make_trie("alpha", "beta", "gamma")
    shared = duplicate(sentence)
    shared = delete_occurrences(shared, "alpha")
    shared = delete_occurrences(shared, "beta")
    assert as_counts(shared) == {"gamma": 1}

    out = build_cooccurrence(sentence)
    assert as_counts(lookup(out, "beta").subtrie) == {"alpha": 1, "gamma": 1}


def test_subtries_do_not_nest(make_trie):
    out = build_cooccurrence(make_trie("alpha", "beta"))
    inner = lookup(lookup(out, "alpha").subtrie, "beta")
    assert inner.subtrie is None


def test_empty_sentence():
    assert build_cooccurrence(None) is None
