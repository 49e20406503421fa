# cooccurrence_trie/context/classifier.py
"""
Token classification: turns one raw corpus token into the events the corpus
builder consumes (a word to index, a sentence boundary, or both).

Classifiers are small strategy objects looked up by name in CLASSIFIERS, so the
sentence-splitting policy can change without touching the trie engine.

  terminal       `.`, `!` and `?` end a sentence; other trailing marks are
                 only stripped ("cat," is a word, "cat." is a word + boundary)
  trailing-mark  any trailing punctuation ends the sentence ("cat," included)

Both skip tokens whose body is not plain a-z after the trailing mark is
removed ("don't", "3rd", "e.g."), but still honour their boundary.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Protocol, Type

from .normalizer import is_indexable, is_mark, normalize_word


class EventKind(Enum):
    WORD = "word"
    BOUNDARY = "boundary"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class TokenEvent:
    kind: EventKind
    word: Optional[str] = None  # normalized word for WORD, raw token for SKIPPED


BOUNDARY = TokenEvent(EventKind.BOUNDARY)


class TokenClassifier(Protocol):
    """Minimal interface the corpus builder relies on."""

    name: str

    def classify(self, token: str) -> List[TokenEvent]:
        ...


class _MarkClassifier(ABC):
    """Shared logic: split off the trailing mark, decide if it ends a sentence."""

    name = ""

    @abstractmethod
    def ends_sentence(self, mark: str) -> bool:
        """True if the trailing punctuation `mark` closes the sentence."""

    def classify(self, token: str) -> List[TokenEvent]:
        if not token:
            return []

        events: List[TokenEvent] = []
        word = normalize_word(token)
        if word:
            if is_indexable(word):
                events.append(TokenEvent(EventKind.WORD, word))
            else:
                events.append(TokenEvent(EventKind.SKIPPED, token))

        last = token[-1]
        if is_mark(last) and self.ends_sentence(last):
            events.append(BOUNDARY)
        return events


class TerminalPunctuationClassifier(_MarkClassifier):
    name = "terminal"
    terminators = frozenset(".!?")

    def ends_sentence(self, mark: str) -> bool:
        return mark in self.terminators


class TrailingMarkClassifier(_MarkClassifier):
    name = "trailing-mark"

    def ends_sentence(self, mark: str) -> bool:
        return True


CLASSIFIERS: Dict[str, Type[_MarkClassifier]] = {
    TerminalPunctuationClassifier.name: TerminalPunctuationClassifier,
    TrailingMarkClassifier.name: TrailingMarkClassifier,
}

DEFAULT_CLASSIFIER = TerminalPunctuationClassifier.name


def get_classifier(name: str) -> TokenClassifier:
    """Instantiate the classifier registered under `name` (KeyError if unknown)."""
    try:
        return CLASSIFIERS[name]()
    except KeyError:
        raise KeyError(f"unknown classifier {name!r}, choose from {sorted(CLASSIFIERS)}") from None
