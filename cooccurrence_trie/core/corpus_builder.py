# corpus_builder.py
# folds a token stream, sentence by sentence, into the global co-occurrence trie.

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional, Union

from cooccurrence_trie.context.classifier import (
    DEFAULT_CLASSIFIER,
    EventKind,
    TokenClassifier,
    get_classifier,
)
from cooccurrence_trie.context.tokenizer import read_tokens
from cooccurrence_trie.utils.logger_utils import Log

from .cooccurrence import build_cooccurrence
from .merge import merge
from .trie import Trie, insert, lookup, word_count


class SentenceState(Enum):
    IN_SENTENCE = "in_sentence"
    AT_BOUNDARY = "at_boundary"


@dataclass
class CorpusStats:
    """Counters collected while building; shown by `--stats`."""
    tokens: int = 0
    words: int = 0  # word occurrences indexed
    sentences: int = 0  # non-empty sentences merged
    cooccurrence_sentences: int = 0  # sentences with 2+ distinct words
    skipped_tokens: int = 0
    dropped_words: int = 0  # trailing words discarded at end of input
    build_seconds: float = 0.0


class CorpusBuilder:
    """
    Two-state machine over classified tokens:
      IN_SENTENCE  words go into the sentence trie
      AT_BOUNDARY  the finished sentence has been merged into the global trie

    At a boundary a sentence with more than one distinct word first gets its
    co-occurrence subtries built, then the sentence trie is merged into the
    global one and a fresh sentence trie is started.
    """

    def __init__(
        self,
        classifier: Optional[TokenClassifier] = None,
        flush_trailing_sentence: bool = True,
        log: Optional[Log] = None,
    ) -> None:
        self.classifier = classifier or get_classifier(DEFAULT_CLASSIFIER)
        self.flush_trailing_sentence = flush_trailing_sentence
        self.log = log or Log()
        self.stats = CorpusStats()
        self.state = SentenceState.IN_SENTENCE

        self._root: Trie = None
        self._sentence: Trie = None
        self._distinct = 0
        self._sentence_words = 0

    @property
    def root(self) -> Trie:
        """Global trie built so far (sentences still open are not included)."""
        return self._root

    # feeding -------------------------------------------------------------------
    def feed(self, token: str) -> None:
        self.stats.tokens += 1
        for event in self.classifier.classify(token):
            if event.kind is EventKind.WORD:
                self.add_word(event.word)
            elif event.kind is EventKind.BOUNDARY:
                self.end_sentence()
            else:
                self.stats.skipped_tokens += 1
                self.log.debug(f"skipped token {event.word!r}")

    def feed_many(self, tokens: Iterable[str]) -> None:
        for token in tokens:
            self.feed(token)

    def add_word(self, word: str) -> None:
        """Insert one normalized word into the current sentence."""
        self._sentence = insert(self._sentence, word)
        if lookup(self._sentence, word).count == 1:
            self._distinct += 1
        self._sentence_words += 1
        self.stats.words += 1
        self.state = SentenceState.IN_SENTENCE

    def end_sentence(self) -> None:
        """Close the current sentence and merge it into the global trie."""
        if self._sentence is None:
            self.state = SentenceState.AT_BOUNDARY
            return

        if self._distinct > 1:
            build_cooccurrence(self._sentence)
            self.stats.cooccurrence_sentences += 1
        self.log.debug(
            f"sentence {self.stats.sentences + 1}: {self._sentence_words} words, "
            f"{self._distinct} distinct"
        )
        self._root = merge(self._root, self._sentence)
        self.stats.sentences += 1
        self._reset_sentence()
        self.state = SentenceState.AT_BOUNDARY

    def _reset_sentence(self) -> None:
        self._sentence = None
        self._distinct = 0
        self._sentence_words = 0

    def finish(self) -> Trie:
        """
        Deal with a final sentence that had no terminator and return the global
        trie. The sentence is merged when flush_trailing_sentence is set,
        otherwise its words are dropped with a warning.
        """
        if self._sentence is not None:
            if self.flush_trailing_sentence:
                self.end_sentence()
            else:
                self.log.warning(
                    f"dropping {self._sentence_words} word(s) of an unterminated final sentence"
                )
                self.stats.dropped_words += self._sentence_words
                self._reset_sentence()
                self.state = SentenceState.AT_BOUNDARY
        return self._root

    def build(self, tokens: Iterable[str]) -> Trie:
        with self.log.time_block("build") as timer:
            self.feed_many(tokens)
            root = self.finish()
        self.stats.build_seconds = timer.elapsed
        if self.log.enabled("INFO"):
            self.log.info(
                f"indexed {self.stats.words} words in {self.stats.sentences} sentences, "
                f"{word_count(root)} distinct"
            )
        return root


def build_trie(
    path: Union[str, Path],
    classifier: Optional[TokenClassifier] = None,
    flush_trailing_sentence: bool = True,
    log: Optional[Log] = None,
) -> Trie:
    """Read a corpus file and return its global co-occurrence trie."""
    builder = CorpusBuilder(classifier, flush_trailing_sentence, log)
    return builder.build(read_tokens(path))
