# cooccurrence_trie/context/tokenizer.py
# whitespace tokenizer for corpus and query files

from __future__ import annotations
from pathlib import Path
from typing import Iterator, List, Union


def simple_tokenize(s: str) -> List[str]:
    """Return the whitespace-delimited fields of `s`, empty fields dropped."""
    if not s:
        return []
    return s.split()


def read_tokens(path: Union[str, Path]) -> Iterator[str]:
    """
    Yield every whitespace-delimited token of a text file, in order.
    The file is read line by line, so tokens never span lines. Bytes that
    are not UTF-8 become U+FFFD, which no word accepts, so such tokens are
    skipped by the classifiers rather than aborting the run.
    OSError from opening or reading propagates to the caller.
    """
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        for line in f:
            yield from simple_tokenize(line)
