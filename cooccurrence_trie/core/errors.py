# errors.py - exceptions raised by the trie engine


class TrieError(Exception):
    """Base class for every error the trie engine raises."""


class InvalidWordError(TrieError, ValueError):
    """A word was empty or contained something other than a-z."""

    def __init__(self, word: str) -> None:
        super().__init__(f"invalid word {word!r}: expected one or more letters a-z")
        self.word = word


class NotFoundError(TrieError, LookupError):
    """Deletion asked for a word (or more occurrences of it) than the trie holds."""

    def __init__(self, word: str, detail: str = "not present in trie") -> None:
        super().__init__(f"{word!r}: {detail}")
        self.word = word
