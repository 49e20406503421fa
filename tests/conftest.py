# tests/conftest.py
import io

import pytest

from cooccurrence_trie.core.trie import insert
from cooccurrence_trie.utils.logger_utils import Log


@pytest.fixture
def make_trie():
    """make_trie("cat", "cat", "dog") -> trie holding cat:2, dog:1"""
    def _make(*words):
        root = None
        for w in words:
            root = insert(root, w)
        return root
    return _make


@pytest.fixture
def log_stream():
    return io.StringIO()


@pytest.fixture
def quiet_log(log_stream):
    return Log(level="DEBUG", stream=log_stream, use_color=False)
