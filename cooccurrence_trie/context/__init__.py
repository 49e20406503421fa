# cooccurrence_trie/context/__init__.py
# token-level collaborators of the trie engine: reading, normalizing, classifying

from .tokenizer import simple_tokenize, read_tokens  # whitespace tokenizer
from .normalizer import normalize_word, is_indexable  # word normalization
from .classifier import (
    CLASSIFIERS,
    DEFAULT_CLASSIFIER,
    EventKind,
    TokenEvent,
    TokenClassifier,
    TerminalPunctuationClassifier,
    TrailingMarkClassifier,
    get_classifier,
)  # sentence boundary / word classification strategies

__all__ = [
    "simple_tokenize",
    "read_tokens",
    "normalize_word",
    "is_indexable",
    "CLASSIFIERS",
    "DEFAULT_CLASSIFIER",
    "EventKind",
    "TokenEvent",
    "TokenClassifier",
    "TerminalPunctuationClassifier",
    "TrailingMarkClassifier",
    "get_classifier",
]
