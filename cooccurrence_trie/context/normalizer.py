# cooccurrence_trie/context/normalizer.py
import re
import string

_word_re = re.compile(r"[a-z]+")
_marks = frozenset(string.punctuation)


def is_mark(ch: str) -> bool:
    """ASCII punctuation such as `.`, `,` or `!`; digits and letters are not marks."""
    return ch in _marks


def strip_trailing_mark(token: str) -> str:
    """Drop a single trailing punctuation character (`cat.` -> `cat`, `go2` kept)."""
    if token and is_mark(token[-1]):
        return token[:-1]
    return token


def normalize_word(token: str) -> str:
    # trailing punctuation off, then lower-case
    return strip_trailing_mark(token).lower()


def is_indexable(word: str) -> bool:
    """True if `word` can be stored in the trie (a-z only, non-empty)."""
    return bool(_word_re.fullmatch(word))
